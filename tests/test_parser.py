import pytest

from railsched.errors import ParsingError
from railsched.parser import (
    Elements,
    Event,
    Rail,
    Schedule,
    Train,
    normalize_duration,
    parse_elements,
    parse_elements_file,
    parse_schedule_files,
    parse_train_file,
    parse_train_lines,
    write_data_file,
)
from railsched.timeconv import convert_to_seconds

SAMPLE = [
    "Node CityA",
    "Node CityB",
    "",
    "Rail CityA CityB 12.5",
    'Event "Signal failure" 0.25 2 m CityA',
]


def test_parse_elements_sample():
    elements = parse_elements(SAMPLE, "data.txt")
    assert elements.nodes == ["CityA", "CityB"]
    assert elements.rails == [Rail("CityA", "CityB", 12.5)]
    assert elements.events == [
        Event("Signal failure", 0.25, normalize_duration(2, "m"), "CityA")
    ]


def test_normalize_duration_units_are_consistent():
    assert normalize_duration(1, "s") == 1
    assert normalize_duration(1, "h") == normalize_duration(60, "m")
    assert normalize_duration(60, "m") == normalize_duration(3600, "s")
    assert normalize_duration(1, "d") == normalize_duration(24, "h")
    assert normalize_duration(1, "y") == normalize_duration(365, "d")


def test_normalize_duration_unknown_unit():
    with pytest.raises(ValueError):
        normalize_duration(1, "w")


@pytest.mark.parametrize(
    "line, message",
    [
        ("Rail A B -1", "Distance cannot be negative"),
        ("Rail A B 1000001", "Distance must be < 1,000,000"),
        ("Rail A B", "Failed to read rail data"),
        ("Rail A B far", "Failed to read rail data"),
        ("Node", "Failed to read node name"),
        ('Event "Storm" 1.5 2 h A', "Probability must be between 0 and 1"),
        ('Event "Storm" 0.5 2 w A', "Failed to read time format"),
        ('Event "Storm" 0.5 2 h', "Failed to read event data"),
        ("Event Storm 0.5 2 h A", "Failed to read event name"),
        ("Station A", "Unknown element type: Station"),
    ],
)
def test_parse_elements_errors(line, message):
    with pytest.raises(ParsingError) as info:
        parse_elements([line], "data.txt")
    assert info.value.message == message
    assert info.value.line == 1
    assert info.value.file == "data.txt"


def test_parse_elements_max_distance_is_allowed():
    elements = parse_elements(["Rail A B 1000000"])
    assert elements.rails[0].distance == 1000000


def test_parse_elements_counts_empty_lines():
    with pytest.raises(ParsingError) as info:
        parse_elements(["Node A", "", "Bogus x"])
    assert info.value.line == 3
    assert info.value.column == len("Bogus") + 1


def test_parse_elements_whitespace_line_fails():
    with pytest.raises(ParsingError) as info:
        parse_elements(["   "])
    assert info.value.message == "Failed to read element type"


def test_parse_elements_file_missing(tmp_path):
    with pytest.raises(ParsingError) as info:
        parse_elements_file(tmp_path / "absent.txt")
    assert info.value.message == "Failed to open file"


def test_write_data_file_event_in_seconds(tmp_path):
    elements = Elements(events=[Event("Delay", 0.5, 120.0, "A")])
    target = tmp_path / "out.txt"
    write_data_file(target, elements)
    assert target.read_text() == 'Event "Delay" 0.5 120s A\n'


def test_parse_train_lines():
    schedule = parse_train_lines(["TrainA 1.5 2.0 CityA CityB 14h10"], "f", "day")
    assert schedule == Schedule(
        "day",
        [Train("TrainA", 1.5, 2.0, "CityA", "CityB", convert_to_seconds("14h10"))],
    )


@pytest.mark.parametrize(
    "line, message",
    [
        ("T", "Failed to read max acceleration"),
        ("T x 1 A B 10h00", "Failed to read max acceleration"),
        ("T 1", "Failed to read max brake force"),
        ("T 1 1", "Failed to read departure"),
        ("T 1 1 A", "Failed to read arrival"),
        ("T 1 1 A B", "Failed to read hour"),
        ("T -1 1 A B 10h00", "MaxAcceleration must be non-negative"),
        ("T 1 -1 A B 10h00", "MaxBrakeForce must be non-negative"),
    ],
)
def test_parse_train_errors(line, message):
    with pytest.raises(ParsingError) as info:
        parse_train_lines([line])
    assert info.value.message == message


def test_parse_train_bad_hour():
    with pytest.raises(ParsingError):
        parse_train_lines(["T 1 1 A B 25h00"])


def test_parse_train_skips_empty_lines_in_numbering():
    lines = ["", "T 1 1 A B 10h00", "", "T 1 1 A B"]
    with pytest.raises(ParsingError) as info:
        parse_train_lines(lines)
    assert info.value.line == 2


def test_parse_train_file_uses_stem(tmp_path):
    path = tmp_path / "morning.schedule"
    path.write_text("T 1 1 A B 06h00\n")
    schedule = parse_train_file(path)
    assert schedule.name == "morning"
    assert [train.name for train in schedule.trains] == ["T"]


def test_parse_schedule_files_filters_suffix(tmp_path):
    (tmp_path / "b.schedule").write_text("T2 1 1 A B 07h00\n")
    (tmp_path / "a.schedule").write_text("T1 1 1 A B 06h00\n")
    (tmp_path / "notes.txt").write_text("not a schedule\n")
    schedules = parse_schedule_files(tmp_path)
    assert [s.name for s in schedules] == ["a", "b"]


def test_parse_schedule_files_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_schedule_files(tmp_path / "nowhere")