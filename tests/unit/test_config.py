"""
Unit tests for board configuration and validation.
"""
import pytest
from minesweeper import (
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    BoardConfig,
    InvalidConfiguration,
    validate,
)
from minesweeper.config import difficulty, max_mines, opening_size


# ============================================================================
# validate() Tests
# ============================================================================

class TestValidate:
    """Test configuration validation."""

    @pytest.mark.parametrize(
        "width, height, mines",
        [
            (9, 9, 10),
            (16, 16, 40),
            (30, 16, 99),
            (9, 9, 72),
            (4, 4, 7),
            (1, 1, 0),
            (1, 5, 2),
            (2, 2, 0),
            (3, 3, 0),
        ],
    )
    def test_valid_configurations(self, width: int, height: int, mines: int) -> None:
        validate(width, height, mines)

    @pytest.mark.parametrize("width, height", [(0, 9), (9, 0), (-1, 5), (0, 0)])
    def test_non_positive_dimensions_rejected(self, width: int, height: int) -> None:
        with pytest.raises(InvalidConfiguration, match="dimensions must be positive"):
            validate(width, height, 0)

    def test_negative_mines_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration, match="cannot be negative"):
            validate(9, 9, -1)

    def test_one_past_capacity_rejected(self) -> None:
        """The opening needs 9 free cells on a 9x9 board."""
        validate(9, 9, 72)
        with pytest.raises(InvalidConfiguration, match="Too many mines"):
            validate(9, 9, 73)

    def test_mines_filling_board_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            validate(5, 5, 25)

    def test_single_cell_with_mine_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            validate(1, 1, 1)

    def test_error_message_names_limit(self) -> None:
        with pytest.raises(InvalidConfiguration, match=r"max 16"):
            validate(5, 5, 17)

    @pytest.mark.parametrize("width, height", [(3, 3), (5, 4), (10, 7), (30, 16)])
    def test_nine_free_cells_always_enough(self, width: int, height: int) -> None:
        validate(width, height, width * height - 9)

    def test_invalid_configuration_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate(0, 0, 0)


class TestCapacity:
    """Test the safe-opening capacity helpers."""

    @pytest.mark.parametrize(
        "width, height, expected",
        [(1, 1, 1), (2, 1, 2), (2, 2, 4), (3, 3, 9), (9, 9, 9), (1, 10, 3)],
    )
    def test_opening_size(self, width: int, height: int, expected: int) -> None:
        assert opening_size(width, height) == expected

    def test_max_mines(self) -> None:
        assert max_mines(9, 9) == 72
        assert max_mines(1, 1) == 0


# ============================================================================
# BoardConfig Tests
# ============================================================================

class TestBoardConfig:
    """Test the configuration data class."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        assert valid_config.width == 9
        assert valid_config.height == 9
        assert valid_config.num_mines == 10
        assert valid_config.safe_cells == 71
        assert valid_config.max_mines == 72

    def test_invalid_config_raises(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Too many mines"):
            BoardConfig(3, 3, 1)

    def test_presets(self) -> None:
        assert (BEGINNER.width, BEGINNER.height, BEGINNER.num_mines) == (9, 9, 10)
        assert (INTERMEDIATE.width, INTERMEDIATE.height, INTERMEDIATE.num_mines) == (16, 16, 40)
        assert (EXPERT.width, EXPERT.height, EXPERT.num_mines) == (30, 16, 99)

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("easy", BEGINNER),
            ("Medium", INTERMEDIATE),
            ("HARD", EXPERT),
            ("beginner", BEGINNER),
            ("expert", EXPERT),
        ],
    )
    def test_difficulty_lookup(self, name: str, expected: BoardConfig) -> None:
        assert difficulty(name) == expected

    def test_unknown_difficulty(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Unknown difficulty"):
            difficulty("nightmare")
