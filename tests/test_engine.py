import pytest

from pocketknight.engine import (
    Attack,
    Clock,
    Collidable,
    Entity,
    MapBorder,
    Rect,
    random_int,
)


class FakeTime:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class Box(Collidable):
    def __init__(self, rect: Rect) -> None:
        super().__init__()
        self.rect = rect

    def global_bounds(self) -> Rect:
        return self.rect

    def update_state(self) -> None:
        pass


def test_rect_overlap_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)


def test_rect_containment_intersects():
    assert Rect(0, 0, 100, 100).intersects(Rect(40, 40, 1, 1))


def test_rect_negative_size_is_normalised():
    assert Rect(10, 10, -10, -10).intersects(Rect(2, 2, 3, 3))


def test_rect_zero_size_never_intersects():
    assert not Rect(5, 5, 0, 0).intersects(Rect(0, 0, 10, 10))


def test_clock_elapsed_and_restart():
    fake = FakeTime()
    clock = Clock(fake)
    fake.now = 2.5
    assert clock.elapsed() == 2.5
    assert clock.restart() == 2.5
    assert clock.elapsed() == 0.0
    fake.now = 3.0
    assert clock.elapsed() == 0.5


def test_entity_is_abstract():
    with pytest.raises(TypeError):
        Entity()


def test_collidable_uses_bounds():
    a = Box(Rect(0, 0, 10, 10))
    b = Box(Rect(5, 5, 10, 10))
    c = Box(Rect(50, 50, 10, 10))
    assert a.is_colliding_with(b)
    assert not a.is_colliding_with(c)
    assert a.is_alive


def test_attack_default_bounds_are_empty():
    attack = Attack()
    assert attack.global_bounds() == Rect(0, 0, 0, 0)
    assert attack.is_alive


def test_attack_expires_after_lifetime():
    fake = FakeTime()
    attack = Attack(Rect(1, 2, 3, 4), Clock(fake))
    fake.now = 0.05
    attack.update_state()
    assert attack.is_alive
    fake.now = 0.1
    attack.update_state()
    assert not attack.is_alive


def test_attack_bounds_can_be_replaced():
    attack = Attack(Rect(0, 0, 32, 32))
    attack.bounds = Rect(10, 10, 32, 32)
    assert attack.global_bounds() == Rect(10, 10, 32, 32)


def test_map_border_argument_order():
    border = MapBorder(30, 40, 100, 200)
    assert border.global_bounds() == Rect(100, 200, 30, 40)
    border.update_state()
    assert border.is_alive


def test_map_border_collides_with_box():
    border = MapBorder(30, 40, 100, 200)
    assert Box(Rect(110, 210, 5, 5)).is_colliding_with(border)
    assert not Box(Rect(0, 0, 5, 5)).is_colliding_with(border)


def test_random_int_stays_in_range():
    values = {random_int(10, 20) for _ in range(500)}
    assert min(values) >= 10
    assert max(values) <= 20


def test_random_int_single_value():
    assert random_int(7, 7) == 7


def test_random_int_empty_range():
    with pytest.raises(ValueError):
        random_int(3, 1)