from shmup.enemies import create_enemy
from shmup.projectiles import bullet_system, spawn_bullet


def test_bullet_moves_up_one_row(world, grid):
    bullet = spawn_bullet(world, 15, 27, '|')
    grid.set(bullet.pos, '|')

    assert bullet_system(world, grid) == []
    assert bullet.pos == (15, 26)
    assert grid.get((15, 27)) == ' '
    assert grid.get((15, 26)) == '|'


def test_bullet_leaves_through_top_wall(world, grid):
    bullet = spawn_bullet(world, 15, 1, '|')
    grid.set(bullet.pos, '|')

    assert bullet_system(world, grid) == []
    assert world.bullets == {}
    assert grid.get((15, 1)) == ' '
    assert grid.get((15, 0)) == '#'


def test_bullet_climbs_strictly_until_it_leaves(world, grid):
    bullet = spawn_bullet(world, 3, 10, '|')
    rows = []
    while world.bullets:
        rows.append(bullet.y)
        bullet_system(world, grid)
    assert rows == list(range(10, 0, -1))


def test_bullet_kills_enemy(world, grid):
    enemy = create_enemy(world, grid, 15, 20)
    bullet = spawn_bullet(world, 16, 22, '|')

    assert bullet_system(world, grid) == [enemy.id]
    assert world.enemies == {}
    assert world.bullets == {}
    assert all(grid.get(c) == ' ' for c in enemy.footprint())
    assert bullet.pos == (16, 21)


def test_one_enemy_dies_once(world, grid):
    enemy = create_enemy(world, grid, 15, 20)
    spawn_bullet(world, 15, 22, '|')
    late = spawn_bullet(world, 16, 22, '|')

    assert bullet_system(world, grid) == [enemy.id]
    assert list(world.bullets) == [late.id]
    assert grid.get((16, 21)) == '|'


def test_bullet_does_not_erase_glyph_drawn_over_it(world, grid):
    bullet = spawn_bullet(world, 15, 21, '|')
    grid.set(bullet.pos, '|')
    create_enemy(world, grid, 14, 21)  # top row covers the bullet's cell

    assert bullet_system(world, grid) == []
    assert bullet.pos == (15, 20)
    assert grid.get((15, 21)) == 'X'
    assert grid.get((15, 20)) == '|'


def test_bullet_passing_player_keeps_player_glyph(world, grid):
    spawn_bullet(world, 5, 10, '|')
    grid.set((5, 10), '@')
    bullet_system(world, grid)
    assert grid.get((5, 10)) == '@'
    assert grid.get((5, 9)) == '|'
