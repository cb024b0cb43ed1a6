from race_track.track.board import Node, Track
from race_track.track.case import Case


def make_case(**overrides):
    track = Track(5, 5)
    track.add_obstacle(1, 4, 2, 3)
    fields = dict(
        case_id=1,
        width=5,
        height=5,
        track=track,
        start=Node(4, 0),
        end=Node(4, 4),
        num_obstacles=1,
    )
    fields.update(overrides)
    return Case(**fields)


class TestCase:
    def test_valid_case(self):
        assert make_case().validate() == []

    def test_points_outside_track(self):
        errors = make_case(start=Node(5, 0)).validate()
        assert errors == ["start or end point is out of grid bounds for test case 1"]

        errors = make_case(end=Node(0, -1), case_id=4).validate()
        assert errors == ["start or end point is out of grid bounds for test case 4"]

    def test_points_on_obstacles(self):
        errors = make_case(end=Node(2, 2)).validate()
        assert errors == [
            "start or end point is blocked by an obstacle for test case 1"
        ]

    def test_bounds_reported_before_obstacles(self):
        errors = make_case(start=Node(9, 9), end=Node(2, 2)).validate()
        assert errors == ["start or end point is out of grid bounds for test case 1"]

    def test_string_shows_track(self):
        text = str(make_case())
        assert text.startswith("Case 1 (5x5, 1 obstacles)")
        assert text.endswith("....S\n.....\n.####\n.####\n....E")
