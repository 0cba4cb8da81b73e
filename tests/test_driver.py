import pytest

from world import FrameDriver, Grid, PointerFrame, make_rng


@pytest.fixture
def driver():
    return FrameDriver(Grid(10, 10), scale=10, rng=make_rng(42)[0])


def test_to_cell_divides_by_scale(driver):
    assert driver.to_cell(0, 0) == (0, 0)
    assert driver.to_cell(59, 31) == (3, 5)


def test_press_places_single_cell(driver):
    placed = driver.handle_pointer(PointerFrame(held=True, x=55, y=25))
    assert placed == 1
    assert driver.grid.is_occupied(2, 5)
    assert driver.prev_cell == (2, 5)


def test_drag_connects_to_previous_cell(driver):
    driver.handle_pointer(PointerFrame(held=True, x=50, y=50))
    driver.handle_pointer(PointerFrame(held=True, x=90, y=50))
    assert all(driver.grid.is_occupied(5, c) for c in range(5, 10))
    assert driver.prev_cell == (5, 9)


def test_release_starts_fresh_stroke(driver):
    driver.handle_pointer(PointerFrame(held=True, x=10, y=50))
    driver.handle_pointer(PointerFrame(held=False))
    assert driver.prev_cell is None
    driver.handle_pointer(PointerFrame(held=True, x=90, y=50))
    assert [c for _, c, _ in driver.grid.snapshot()] == [1, 9]


def test_off_canvas_pointer_is_recoverable(driver):
    assert driver.handle_pointer(PointerFrame(held=True, x=500, y=50)) == 0
    assert driver.prev_cell == (5, 50)
    assert driver.grid.occupied_count() == 0
    # dragging back onto the canvas draws the visible part of the line
    driver.handle_pointer(PointerFrame(held=True, x=70, y=50))
    assert [c for _, c, _ in driver.grid.snapshot()] == [7, 8, 9]


def test_tick_settles_every_frame(driver):
    assert driver.tick(PointerFrame(held=True, x=50, y=0))
    assert [(r, c) for r, c, _ in driver.cells()] == [(1, 5)]
    assert driver.tick(PointerFrame())
    assert [(r, c) for r, c, _ in driver.cells()] == [(2, 5)]
    assert driver.ticks == 2


def test_quit_stops_without_settling(driver):
    driver.grid.place(0, 0, (200, 170, 60))
    assert driver.tick(PointerFrame(quit=True)) is False
    assert driver.grid.is_occupied(0, 0)
    assert driver.ticks == 0


def test_scale_must_be_positive():
    with pytest.raises(ValueError):
        FrameDriver(Grid(2, 2), scale=0, rng=make_rng(1)[0])


def test_negative_pointer_ends_stroke(driver):
    driver.handle_pointer(PointerFrame(held=True, x=-200, y=50))
    assert driver.prev_cell is None
    driver.handle_pointer(PointerFrame(held=True, x=50, y=50))
    assert [(r, c) for r, c, _ in driver.grid.snapshot()] == [(5, 5)]


def test_clear_frame_resets_canvas(driver):
    driver.tick(PointerFrame(held=True, x=10, y=90))
    driver.tick(PointerFrame(held=True, x=90, y=90))
    assert driver.grid.occupied_count() > 0
    assert driver.tick(PointerFrame(clear=True))
    assert driver.grid.occupied_count() == 0
    assert driver.prev_cell is None
    assert driver.ticks == 3
