import pygame
import pytest

from pocketknight.assets import Assets
from pocketknight.engine import Attack, MapBorder, Rect
from pocketknight.explosion import EXPLOSION_SIZE, Explosion


class FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(scope="module")
def assets(tmp_path_factory):
    return Assets(tmp_path_factory.mktemp("assets"))


@pytest.fixture
def clock():
    return FakeTime()


def test_bounds_start_at_tnt_position(assets, clock):
    explosion = Explosion((100.0, 200.0), assets, time_source=clock)
    assert explosion.global_bounds() == Rect(100.0, 200.0, EXPLOSION_SIZE, EXPLOSION_SIZE)


def test_sprite_is_offset_from_bounds(assets, clock):
    explosion = Explosion((100.0, 200.0), assets, time_source=clock)
    bounds = explosion.global_bounds()
    assert bounds.left - explosion.sprite.position[0] == EXPLOSION_SIZE
    assert bounds.top - explosion.sprite.position[1] == EXPLOSION_SIZE


def test_is_an_attack(assets, clock):
    explosion = Explosion((0.0, 0.0), assets, time_source=clock)
    assert isinstance(explosion, Attack)
    assert explosion.is_alive is True


def test_stays_alive_briefly_then_expires(assets, clock):
    explosion = Explosion((0.0, 0.0), assets, time_source=clock)
    clock.advance(0.05)
    explosion.update_state()
    assert explosion.is_alive is True
    clock.advance(0.06)
    explosion.update_state()
    assert explosion.is_alive is False


def test_update_applies_current_animation_frame(assets, clock):
    explosion = Explosion((0.0, 0.0), assets, time_source=clock)
    clock.advance(0.2)
    explosion.update_state()
    animation = assets.animation("explosion")
    assert explosion.sprite.texture_rect == animation.frames[animation.index]


def test_time_of_explosion_tracks_time(assets, clock):
    explosion = Explosion((0.0, 0.0), assets, time_source=clock)
    clock.advance(0.9)
    assert explosion.time_of_explosion.elapsed() == pytest.approx(0.9)


def test_collides_with_overlapping_border(assets, clock):
    explosion = Explosion((10.0, 10.0), assets, time_source=clock)
    near = MapBorder(20.0, 20.0, 0.0, 0.0)
    far = MapBorder(5.0, 5.0, 500.0, 500.0)
    assert explosion.is_colliding_with(near) is True
    assert explosion.is_colliding_with(far) is False


def test_render_draws_sprite_at_its_position(assets, clock):
    explosion = Explosion((100.0, 100.0), assets, time_source=clock)
    red = pygame.Color(255, 0, 0, 255)
    texture = pygame.Surface((EXPLOSION_SIZE, EXPLOSION_SIZE))
    texture.fill(red)
    explosion.sprite.texture = texture
    target = pygame.Surface((200, 200))
    explosion.render(target)
    x, y = (round(v) for v in explosion.sprite.position)
    assert target.get_at((x, y)) == red
    assert target.get_at((199, 199)) != red