import pytest

from mathsolvers.probability import (
    candy_lottery,
    dice_probability,
    inversion_probability,
    moving_robots,
)


def test_candy_lottery_worked_example():
    assert f"{candy_lottery(2, 3):.6f}" == "2.444444"


def test_candy_lottery_single_candy():
    assert candy_lottery(5, 1) == pytest.approx(1.0)


def test_candy_lottery_one_child_is_mean():
    for k in range(1, 20):
        assert candy_lottery(1, k) == pytest.approx((k + 1) / 2)


def test_candy_lottery_grows_with_children():
    values = [candy_lottery(c, 10) for c in range(1, 10)]
    assert values == sorted(values)
    assert values[-1] <= 10


def test_candy_lottery_invalid():
    with pytest.raises(ValueError):
        candy_lottery(2, 0)


def test_dice_probability_worked_example():
    assert f"{dice_probability(2, 9, 10):.6f}" == "0.194444"


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_dice_probability_full_range(n):
    assert dice_probability(n, n, 6 * n) == pytest.approx(1.0)


def test_dice_probability_single_die_each_face():
    for face in range(1, 7):
        assert dice_probability(1, face, face) == pytest.approx(1 / 6)


def test_dice_probability_out_of_reach():
    assert dice_probability(3, 0, 2) == 0.0
    assert dice_probability(2, 5, 4) == 0.0


def test_dice_probability_invalid():
    with pytest.raises(ValueError):
        dice_probability(-1, 1, 2)


def test_inversion_probability_worked_example():
    assert f"{inversion_probability([5, 2, 7]):.6f}" == "1.057143"


def test_inversion_probability_single_item():
    assert inversion_probability([7]) == 0.0


def test_inversion_probability_all_ones():
    assert inversion_probability([1, 1, 1, 1]) == 0.0


def test_inversion_probability_invalid():
    with pytest.raises(ValueError):
        inversion_probability([3, 0])


def test_moving_robots_no_moves():
    assert moving_robots(0) == pytest.approx(0.0)


def test_moving_robots_bounded():
    for k in range(1, 5):
        assert 0.0 <= moving_robots(k) <= 64.0


def test_moving_robots_invalid():
    with pytest.raises(ValueError):
        moving_robots(-1)