from datetime import date

import pytest

from sipetuk.models import calculate_days_left, format_task_line
from sipetuk.system import (
    COMPLETED_FILE,
    INCOMPLETE_FILE,
    NoTasksError,
    NothingToUndoError,
    TaskManager,
    TaskNotFoundError,
)

TODAY = date(2024, 1, 1)


@pytest.fixture
def manager(tmp_path):
    result = TaskManager(TODAY, tmp_path)
    result.load()
    return result


def test_load_creates_missing_files(tmp_path):
    manager = TaskManager(TODAY, tmp_path)
    created = manager.load()
    assert created == [INCOMPLETE_FILE, COMPLETED_FILE]
    assert (tmp_path / INCOMPLETE_FILE).read_text() == ""
    assert (tmp_path / COMPLETED_FILE).read_text() == ""
    assert manager.next_id == 1


def test_second_load_creates_nothing(tmp_path):
    TaskManager(TODAY, tmp_path).load()
    assert TaskManager(TODAY, tmp_path).load() == []


def test_add_task_assigns_ids_and_days_left(manager):
    first = manager.add_task("Laporan", "Fisika", "15_01_2024", "bab 1")
    second = manager.add_task("Kuis", "Algoritma", "20_02_2024", "online")
    assert [first.task_id, second.task_id] == [1, 2]
    assert first.days_left == calculate_days_left(TODAY, "15_01_2024")
    assert manager.incomplete() == [second, first]


def test_add_task_rejects_bad_deadline_without_using_id(manager):
    with pytest.raises(ValueError):
        manager.add_task("A", "B", "kemarin", "C")
    assert manager.add_task("A", "B", "01_02_2024", "C").task_id == 1


def test_save_and_load_round_trip(tmp_path, manager):
    a = manager.add_task("Laporan", "Fisika", "15_01_2024", "bab 1, bab 2")
    b = manager.add_task("Kuis", "Algoritma", "20_02_2024", "online")
    manager.mark_completed(b.task_id)
    manager.save()

    assert (tmp_path / INCOMPLETE_FILE).read_text() == format_task_line(a) + "\n"

    reloaded = TaskManager(TODAY, tmp_path)
    reloaded.load()
    assert reloaded.incomplete() == [a]
    assert [t.task_id for t in reloaded.completed()] == [b.task_id]
    assert reloaded.completed()[0].days_left == 0
    assert reloaded.next_id == b.task_id + 1


def test_load_reads_existing_files(tmp_path):
    (tmp_path / INCOMPLETE_FILE).write_text("7,Esai,Sejarah,10_01_2024,tulis\n\n")
    (tmp_path / COMPLETED_FILE).write_text("12,Quiz,Kimia,01_01_2024,done\n")
    manager = TaskManager(TODAY, tmp_path)
    assert manager.load() == []
    [task] = manager.incomplete()
    assert (task.task_id, task.name, task.note) == (7, "Esai", "tulis")
    assert task.days_left == calculate_days_left(TODAY, "10_01_2024")
    assert manager.next_id == 13


def test_load_rejects_malformed_line(tmp_path):
    (tmp_path / INCOMPLETE_FILE).write_text("rusak\n")
    with pytest.raises(ValueError):
        TaskManager(TODAY, tmp_path).load()


def test_delete_and_undo(manager):
    task = manager.add_task("Laporan", "Fisika", "15_01_2024", "catatan")
    assert manager.delete_task(task.task_id) == task
    assert manager.incomplete() == []
    assert manager.by_priority(3) == []
    restored = manager.undo_delete()
    assert restored == task
    assert manager.incomplete() == [task]
    assert manager.by_priority(3) == [task]


def test_delete_errors(manager):
    with pytest.raises(NoTasksError):
        manager.delete_task(1)
    manager.add_task("Laporan", "Fisika", "15_01_2024", "catatan")
    with pytest.raises(TaskNotFoundError):
        manager.delete_task(99)


def test_undo_with_nothing_removed(manager):
    with pytest.raises(NothingToUndoError):
        manager.undo_delete()


def test_undo_order_is_last_in_first_out(manager):
    a = manager.add_task("A", "X", "05_01_2024", "n")
    b = manager.add_task("B", "Y", "06_01_2024", "n")
    manager.delete_task(a.task_id)
    manager.delete_task(b.task_id)
    assert manager.undo_delete() == b
    assert manager.undo_delete() == a


def test_mark_completed_moves_task_and_can_be_undone(manager):
    task = manager.add_task("Laporan", "Fisika", "15_01_2024", "catatan")
    manager.mark_completed(task.task_id)
    assert manager.incomplete() == []
    assert manager.completed() == [task]
    manager.undo_delete()
    assert manager.incomplete() == [task]
    assert manager.completed() == [task]


def test_mark_completed_errors(manager):
    with pytest.raises(NoTasksError):
        manager.mark_completed(1)
    manager.add_task("Laporan", "Fisika", "15_01_2024", "catatan")
    with pytest.raises(TaskNotFoundError):
        manager.mark_completed(5)


def test_by_subject_filters_course(manager):
    a = manager.add_task("A", "Fisika", "15_01_2024", "n")
    manager.add_task("B", "Kimia", "15_01_2024", "n")
    c = manager.add_task("C", "Fisika", "20_01_2024", "n")
    assert sorted(t.task_id for t in manager.by_subject("Fisika")) == [a.task_id, c.task_id]
    assert manager.by_subject("Biologi") == []


def test_by_priority_orders_by_days_left(manager):
    late = manager.add_task("Late", "X", "01_06_2024", "n")
    soon = manager.add_task("Soon", "X", "02_01_2024", "n")
    mid = manager.add_task("Mid", "X", "01_03_2024", "n")
    assert manager.by_priority(10) == [soon, mid, late]
    assert manager.by_priority(2) == [soon, mid]