"""
Free-time advisor tests
"""

from conftest import build_day_grid, cell
from weekgrid.schemas import Activity, ScheduleGrid, ScheduleSlot, UserScheduleConstraints
from weekgrid.scheduling import suggest, synthesize
from weekgrid.scheduling.algorithms.suggestions import suggest_for_slot

WORK = ("Work", "Work")


def test_decision_table_bands():
    assert suggest_for_slot(6, True, None, "Work") == "Morning Planning"
    assert suggest_for_slot(6, True, None, "Personal") == "Morning Exercise"
    assert suggest_for_slot(9, True, None, None) == "Focus Work"
    assert suggest_for_slot(9, False, None, None) == "Learning"
    assert suggest_for_slot(12, False, None, None) == "Lunch"
    assert suggest_for_slot(14, True, "Work", "Work") == "Short Break"
    assert suggest_for_slot(15, True, "Personal", "Work") == "Admin Tasks"
    assert suggest_for_slot(15, False, "Personal", None) == "Reading"
    assert suggest_for_slot(16, True, "Work", None) == "Work Wrap-up"
    assert suggest_for_slot(17, False, "Work", None) == "Exercise"
    assert suggest_for_slot(19, True, None, None) == "Dinner"
    assert suggest_for_slot(22, True, None, None) == "Relaxation"
    assert suggest_for_slot(23, True, None, None) == "Flexible Time"
    assert suggest_for_slot(3, True, None, None) == "Flexible Time"


def test_suggestions_carry_categories(monday_worker):
    result = suggest(build_day_grid(), monday_worker)

    assert cell(result, 9).content == "Focus Work"
    assert cell(result, 9).category == "Work"
    assert cell(result, 21).content == "Relaxation"
    assert cell(result, 21).category == "Leisure"
    assert cell(result, 6).category == "Exercise"


def test_non_work_day_gets_learning():
    constraints = UserScheduleConstraints(work_days=["Tuesday"])
    result = suggest(build_day_grid(days=("Monday",)), constraints)
    assert cell(result, 9).content == "Learning"


def test_sandwiched_slot_becomes_short_break(monday_worker):
    grid = build_day_grid({(13, "Monday"): WORK, (15, "Monday"): WORK})
    result = suggest(grid, monday_worker)
    assert cell(result, 14).content == "Short Break"


def test_neighbours_come_from_input_snapshot(monday_worker):
    # 15:00 becomes Admin Tasks (Work), but 16:00 must still see the Free Time before it
    result = suggest(build_day_grid(), monday_worker)

    assert cell(result, 15).content == "Admin Tasks"
    assert cell(result, 16).content == "Exercise"


def test_only_free_time_is_replaced(monday_worker):
    grid = build_day_grid({(10, "Monday"): ("Dentist", "Personal"), (2, "Monday"): ("Sleep", "Sleep")})
    result = suggest(grid, monday_worker)

    assert cell(result, 10).content == "Dentist"
    assert cell(result, 2).content == "Sleep"


def test_running_twice_changes_nothing_more(monday_worker):
    grid = synthesize(monday_worker)
    first = suggest(grid, monday_worker)
    second = suggest(first, monday_worker)

    assert second.slots == first.slots
    assert not any(a.content == "Free Time" for slot in first.slots for a in slot.activities.values())


def test_unparseable_slot_label_left_unchanged(monday_worker):
    grid = ScheduleGrid(slots=[
        ScheduleSlot(time="Morning", activities={"Monday": Activity(content="Free Time", category="Personal")}),
        ScheduleSlot(time="9:00 AM", activities={"Monday": Activity(content="Free Time", category="Personal")}),
    ])
    result = suggest(grid, monday_worker)

    assert result.slots[0].activities["Monday"].content == "Free Time"
    assert result.slots[1].activities["Monday"].content == "Focus Work"


def test_input_grid_not_modified(monday_worker):
    grid = build_day_grid()
    before = grid.model_copy(deep=True)
    suggest(grid, monday_worker)
    assert grid == before
