"""Shape chain: doubly-linked nodes and the ping-pong traversal cursor."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from bitrap.scale import ScaleState
from bitrap.types import OnCycleComplete, OnStart

if TYPE_CHECKING:
    from bitrap.config import FillConfig
    from bitrap.types import Canvas


class ShapeNode:
    """One shape of the chain. Owns the ScaleState for its draw animation."""

    def __init__(self, index: int, step: float) -> None:
        self.index = index
        self.state = ScaleState(step)
        self.next: ShapeNode | None = None
        self.prev: ShapeNode | None = None

    @property
    def progress(self) -> float:
        return self.state.progress

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_shape(self.index, self.state.progress, canvas.width, canvas.height)

    def update(self, on_cycle_complete: OnCycleComplete) -> None:
        self.state.update(on_cycle_complete)

    def start_updating(self, on_start: OnStart) -> None:
        self.state.start_updating(on_start)

    def neighbor(self, direction: int, on_missing: Callable[[], None]) -> ShapeNode:
        """Return the linked node in ``direction`` (-1 or +1).

        At a chain boundary ``on_missing`` is called and ``self`` is returned.
        """
        node = self.prev if direction == -1 else self.next
        if node is None:
            on_missing()
            return self
        return node

    def __repr__(self) -> str:
        return f"ShapeNode(index={self.index}, state={self.state!r})"


def build_chain(config: FillConfig) -> list[ShapeNode]:
    """Build ``config.chain_length`` nodes, then wire forward/backward links."""
    nodes = [ShapeNode(i, config.step) for i in range(config.chain_length)]
    for prev, node in zip(nodes, nodes[1:]):
        prev.next = node
        node.prev = prev
    return nodes


class ChainCursor:
    """Active node plus traversal direction; walks the chain back and forth."""

    def __init__(self, nodes: Sequence[ShapeNode]) -> None:
        if not nodes:
            raise ValueError("ChainCursor needs at least one node")
        self._nodes = tuple(nodes)
        self._active = self._nodes[0]
        self._direction = 1

    @property
    def nodes(self) -> tuple[ShapeNode, ...]:
        return self._nodes

    @property
    def active(self) -> ShapeNode:
        return self._active

    @property
    def direction(self) -> int:
        return self._direction

    def _reverse(self) -> None:
        self._direction *= -1

    def update(self, on_fully_idle: OnCycleComplete) -> None:
        def on_cycle_complete(committed: float) -> None:
            self._active = self._active.neighbor(self._direction, self._reverse)
            on_fully_idle(committed)

        self._active.update(on_cycle_complete)

    def start_updating(self, on_start: OnStart) -> None:
        self._active.start_updating(on_start)
