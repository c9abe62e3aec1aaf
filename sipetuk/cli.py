"""Interactive menu for managing coursework tasks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .hash_table import TableFullError
from .sorting import format_priority_table, format_subject_table, format_task_table
from .system import NoTasksError, NothingToUndoError, TaskManager, TaskNotFoundError

MENU = "\n".join(
    [
        "",
        "=== Menu SiPeTuK ===",
        "1. Tambah Tugas",
        "2. Lihat Tugas Belum Selesai",
        "3. Lihat Tugas Selesai",
        "4. Hapus Tugas",
        "5. Undo Penghapusan",
        "6. Tandai Selesai",
        "7. Lihat Tugas Berdasarkan Mata Kuliah",
        "8. Lihat Tugas Berdasarkan Prioritas",
        "9. Keluar",
    ]
)

PRIORITY_CHOICES = {1: 3, 2: 5, 3: 10}


def _read_text(prompt: str) -> str:
    """Read the next non-blank line, without its leading whitespace."""
    line = input(prompt)
    while not line.strip():
        line = input()
    return line.lstrip()


def _read_int(prompt: str) -> int | None:
    """Read a number from the next non-blank line; None if it is not one."""
    token = _read_text(prompt).split()[0]
    try:
        return int(token)
    except ValueError:
        return None


def _add_task(manager: TaskManager) -> None:
    name = _read_text("Masukkan nama tugas: ")
    course = _read_text("Masukkan mata kuliah: ")
    deadline = _read_text("Masukkan tenggat waktu (DD_MM_YYYY): ")
    note = _read_text("Masukkan catatan: ")
    try:
        manager.add_task(name, course, deadline, note)
    except ValueError:
        print("Format tenggat waktu tidak valid.")
        return
    except TableFullError:
        print("Tabel tugas penuh.")
        return
    print("Tugas berhasil ditambahkan!")


def _show_incomplete(manager: TaskManager) -> None:
    _show_tasks(manager.incomplete(), "Belum Selesai")


def _show_completed(manager: TaskManager) -> None:
    _show_tasks(manager.completed(), "Selesai")


def _show_tasks(tasks: list, kind: str) -> None:
    if not tasks:
        print(f"\nTidak ada tugas {kind}.")
        return
    print()
    print(format_task_table(tasks))


def _change_task(
    manager: TaskManager,
    prompt: str,
    action: Callable[[int], object],
    empty_message: str,
    done_message: str,
) -> None:
    task_id = _read_int(prompt)
    try:
        if task_id is None:
            if not manager.incomplete():
                raise NoTasksError
            raise TaskNotFoundError
        action(task_id)
    except NoTasksError:
        print(empty_message)
    except TaskNotFoundError:
        print("Tugas tidak ditemukan.")
    except TableFullError:
        print("Tabel tugas penuh.")
    else:
        print(done_message)


def _delete_task(manager: TaskManager) -> None:
    _change_task(
        manager,
        "Masukkan ID tugas yang akan dihapus: ",
        manager.delete_task,
        "Tidak ada tugas untuk dihapus.",
        "Tugas berhasil dihapus!",
    )


def _mark_completed(manager: TaskManager) -> None:
    _change_task(
        manager,
        "Masukkan ID tugas yang selesai: ",
        manager.mark_completed,
        "Tidak ada tugas untuk ditandai selesai.",
        "Tugas ditandai selesai!",
    )


def _undo_delete(manager: TaskManager) -> None:
    try:
        manager.undo_delete()
    except NothingToUndoError:
        print("Tidak ada tugas untuk dikembalikan.")
    except TableFullError:
        print("Tabel tugas penuh.")
    else:
        print("Tugas berhasil dikembalikan!")


def _show_by_subject(manager: TaskManager) -> None:
    course = _read_text("Masukkan nama mata kuliah: ")
    tasks = manager.by_subject(course)
    if not tasks:
        print(f"\nTidak ada tugas untuk mata kuliah {course}.")
        return
    print(f"\nDaftar Tugas Mata Kuliah {course}")
    print(format_subject_table(tasks))


def _show_by_priority(manager: TaskManager) -> None:
    if not manager.incomplete():
        print("\nTidak ada tugas yang belum selesai.")
        return
    print("Pilih jumlah tugas mendesak yang ingin ditampilkan:")
    print("1. Top 3")
    print("2. Top 5")
    print("3. Top 10")
    choice = _read_int("Pilih opsi (1-3): ")
    count = PRIORITY_CHOICES.get(choice) if choice is not None else None
    if count is None:
        print("Opsi tidak valid.")
        count = PRIORITY_CHOICES[1]
    print()
    print(format_priority_table(manager.by_priority(count)))


ACTIONS: dict[int, Callable[[TaskManager], None]] = {
    1: _add_task,
    2: _show_incomplete,
    3: _show_completed,
    4: _delete_task,
    5: _undo_delete,
    6: _mark_completed,
    7: _show_by_subject,
    8: _show_by_priority,
}
EXIT_CHOICE = 9


def main(argv: list[str] | None = None) -> int:
    """Run the interactive task menu until the user chooses to quit."""
    parser = argparse.ArgumentParser(prog="sipetuk", description="Manage coursework tasks.")
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directory holding the task files (default: current directory)",
    )
    args = parser.parse_args(argv)

    manager = TaskManager(directory=args.directory)
    try:
        created = manager.load()
    except (OSError, ValueError) as error:
        print(f"sipetuk: {error}", file=sys.stderr)
        return 1
    for name in created:
        print(f"File {name} dibuat.")

    today = manager.current_date
    print("=== SiPeTuK: Sistem Pengelola Tugas Kuliah ===")
    print(f"Tanggal Saat Ini: {today.day:02d}-{today.month:02d}-{today.year:04d}")

    try:
        while True:
            print(MENU)
            choice = _read_int("Pilih opsi: ")
            if choice == EXIT_CHOICE:
                break
            action = ACTIONS.get(choice) if choice is not None else None
            if action is None:
                print("Opsi tidak valid!")
                continue
            action(manager)
    except EOFError:
        print()

    manager.save()
    print("Program selesai.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())