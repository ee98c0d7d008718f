import io

import pytest

from school.core.exceptions import InsufficientStudentsError
from school.services.name_printer import COUNT_NAMES, NamePrinter

NAMES = ["Anna", "Boris", "Clara", "Denis", "Elena", "Fedor", "Unused"]


@pytest.mark.parametrize("mode", ["print_parallel", "print_synchronized"])
def test_prints_first_six_names_once(mode):
    sink = io.StringIO()

    getattr(NamePrinter(sink), mode)(NAMES)

    lines = sink.getvalue().splitlines()
    assert len(lines) == COUNT_NAMES
    assert sorted(line.split(": ", 1)[1] for line in lines) == sorted(NAMES[:COUNT_NAMES])
    assert lines[0] == "Main Thread: Anna"
    assert lines[1] == "Main Thread: Boris"
    assert {line.split(": ", 1)[0] for line in lines[2:]} == {
        "Parallel Thread 1",
        "Parallel Thread 2",
    }


def test_each_worker_keeps_its_order():
    sink = io.StringIO()

    NamePrinter(sink).print_synchronized(NAMES)

    lines = sink.getvalue().splitlines()
    assert lines.index("Parallel Thread 1: Clara") < lines.index("Parallel Thread 1: Denis")
    assert lines.index("Parallel Thread 2: Elena") < lines.index("Parallel Thread 2: Fedor")


def test_rejects_too_few_names():
    sink = io.StringIO()

    with pytest.raises(InsufficientStudentsError) as exc_info:
        NamePrinter(sink).print_parallel(NAMES[:3])

    assert exc_info.value.required == 6
    assert exc_info.value.found == 3
    assert sink.getvalue() == ""
