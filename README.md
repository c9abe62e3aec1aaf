# sipetuk

An interactive manager for course assignments. It keeps track of unfinished
and finished tasks, lists them by course, ranks the most urgent ones by the
days left until their deadline, and can undo a removal. The menu and its
messages are in Indonesian.

## Installation

    pip install .

## Usage

    sipetuk                  # task files in the current directory
    sipetuk -d ~/kuliah      # task files in another directory

The menu offers:

1. Add a task (name, course, deadline as `DD_MM_YYYY`, note)
2. List unfinished tasks, sorted by course
3. List finished tasks, sorted by course
4. Delete an unfinished task by its ID
5. Undo the last removal
6. Mark an unfinished task as finished
7. List the unfinished tasks of one course
8. Show the 3, 5 or 10 most urgent unfinished tasks
9. Save and quit

Closing the input (end of file) also saves and quits.

## Task files

Tasks are stored in `incomplete_tasks.txt` and `completed_tasks.txt`, one
task per line as `id,name,course,deadline,note`. Missing files are created
at start-up, and both files are rewritten when the program quits. The name
and course may hold up to 49 characters and no commas; the note may contain
commas and is cut to 99 characters when read. A malformed line stops
start-up with an error message and exit status 1.

New tasks get the id following the highest id found in either file.

Days left are counted with 365-day years and 30-day months, so they are an
estimate for ranking rather than exact calendar arithmetic. A deadline that
is not in `DD_MM_YYYY` form is rejected.

## Library use

    from datetime import date
    from pathlib import Path
    from sipetuk.system import TaskManager, TaskNotFoundError

    manager = TaskManager(date.today(), Path("."))
    manager.load()                       # returns the names of files it created
    task = manager.add_task("Essay", "History", "01_12_2030", "two pages")
    for urgent in manager.by_priority(3):
        print(urgent.days_left, urgent.name)
    try:
        manager.delete_task(12345)
    except TaskNotFoundError:
        pass
    manager.save()

`TaskManager` also has `mark_completed`, `undo_delete`, `incomplete`,
`completed` and `by_subject`. Failed operations raise `NoTasksError`,
`TaskNotFoundError` or `NothingToUndoError` from `sipetuk.system`. The
building blocks live in `sipetuk.models` (`Task`, `calculate_days_left`,
`parse_task_line`, `format_task_line`), `sipetuk.hash_table` (`TaskTable`,
`TableFullError`), `sipetuk.min_heap` (`MinHeap`), `sipetuk.undo_stack`
(`UndoStack`) and `sipetuk.sorting` (`merge_sort`, `binary_search` and the
table formatters).

## Limitations

- Tasks cannot be edited once added; delete and add them again.
- Each task list holds at most 1000 tasks.
- The undo history is kept only while the program runs. Marking a task as
  finished is also recorded as a removal, so undoing it puts the task back
  among the unfinished ones while it stays in the finished list.
- Nothing is written to disk until the program quits.

## Running the tests

    pip install .[test]
    pytest