"""Tests for Cell, Grid and GameSession basics."""

from minidungeon.sim.core.cells import SPRITES, Cell, CellType
from minidungeon.sim.core.game_state import GameOverReason, GameSession, GameStatus
from minidungeon.sim.core.geometry import Position
from minidungeon.sim.core.grid import Grid


class TestCell:
    def test_default_is_empty(self):
        cell = Cell()
        assert cell.cell_type == CellType.EMPTY
        assert cell.sprite is None
        assert not cell.consumed

    def test_sprites(self):
        assert Cell.of(CellType.GOLD).sprite == "treasure.png"
        assert Cell.of(CellType.HEALTH_POTION).sprite == "health.png"
        assert Cell.of(CellType.TRAP).sprite == "trap.png"
        assert Cell.of(CellType.LADDER).sprite == "ladder.png"
        assert Cell.of(CellType.MELEE_ENEMY).sprite == "zombie.png"
        assert Cell.of(CellType.RANGED_ENEMY).sprite == "ranged_mutant.png"
        for cell_type in (CellType.EMPTY, CellType.ENTRY, CellType.WALL):
            assert Cell.of(cell_type).sprite is None

    def test_every_type_has_a_sprite_entry(self):
        assert set(SPRITES) == set(CellType)

    def test_only_walls_block(self):
        for cell_type in CellType:
            assert Cell.of(cell_type).blocks_movement == (cell_type == CellType.WALL)

    def test_consumables_and_enemies(self):
        assert Cell.of(CellType.GOLD).is_consumable
        assert Cell.of(CellType.HEALTH_POTION).is_consumable
        assert not Cell.of(CellType.TRAP).is_consumable
        assert Cell.of(CellType.MELEE_ENEMY).is_enemy
        assert Cell.of(CellType.RANGED_ENEMY).is_enemy
        assert not Cell.of(CellType.LADDER).is_enemy

    def test_fresh_instances_are_independent(self):
        a = Cell.of(CellType.GOLD)
        b = Cell.of(CellType.GOLD)
        a.consumed = True
        assert not b.consumed


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

class TestGrid:
    def test_fully_populated_with_empty(self):
        grid = Grid()
        assert grid.size == 10
        assert len(grid.rows) == 10
        assert all(len(row) == 10 for row in grid.rows)
        assert grid.count(CellType.EMPTY) == 100

    def test_set_and_get(self):
        grid = Grid()
        pos = Position(3, 4)
        assert grid.set_cell(pos, Cell.of(CellType.TRAP))
        assert grid.cell_at(pos).cell_type == CellType.TRAP

    def test_set_replaces_instance(self):
        grid = Grid()
        pos = Position(1, 1)
        old = grid.cell_at(pos)
        new = Cell.of(CellType.GOLD)
        grid.set_cell(pos, new)
        assert grid.cell_at(pos) is new
        assert grid.cell_at(pos) is not old

    def test_missing_position(self):
        grid = Grid()
        assert grid.cell_at(None) is None
        assert not grid.set_cell(None, Cell())

    def test_positions_row_major(self):
        positions = list(Grid().positions())
        assert len(positions) == 100
        assert positions[0] == Position(0, 0)
        assert positions[1] == Position(0, 1)
        assert positions[10] == Position(1, 0)
        assert positions[-1] == Position(9, 9)

    def test_find(self):
        grid = Grid()
        grid.set_cell(Position(5, 1), Cell.of(CellType.WALL))
        grid.set_cell(Position(2, 8), Cell.of(CellType.WALL))
        assert grid.find(CellType.WALL) == [Position(2, 8), Position(5, 1)]

    def test_type_layout(self):
        grid = Grid()
        grid.set_cell(Position(0, 0), Cell.of(CellType.ENTRY))
        layout = grid.type_layout()
        assert layout[0][0] == CellType.ENTRY
        assert layout[9][9] == CellType.EMPTY


# ---------------------------------------------------------------------------
# GameSession
# ---------------------------------------------------------------------------

class TestGameSession:
    def _session(self) -> GameSession:
        return GameSession(grid=Grid(), difficulty=1, seed=0)

    def test_initial_status(self):
        session = self._session()
        assert session.status == GameStatus.IN_PROGRESS
        assert not session.is_over
        assert session.over_reason is None
        assert session.size == 10

    def test_finish(self):
        session = self._session()
        session.finish(GameOverReason.VICTORY, "won")
        assert session.is_over
        assert session.is_won
        assert session.status_message == "won"

    def test_replace_cell_accepts_tuples(self):
        session = self._session()
        assert session.replace_cell((4, 4), Cell.of(CellType.GOLD))
        assert session.cell_at(Position(4, 4)).cell_type == CellType.GOLD

    def test_replace_cell_rejects_invalid(self):
        session = self._session()
        before = session.grid.type_layout()
        assert not session.replace_cell((10, 0), Cell.of(CellType.GOLD))
        assert not session.replace_cell((0, -1), Cell.of(CellType.GOLD))
        assert not session.replace_cell(None, Cell.of(CellType.GOLD))
        assert session.grid.type_layout() == before

    def test_serialization_excludes_runtime_fields(self):
        session = self._session()
        session.observer = print
        dumped = session.model_dump()
        assert "rng" not in dumped
        assert "observer" not in dumped
