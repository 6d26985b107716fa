import pytest

from src.burrow.config import BurrowConfig
from src.burrow.parser import ParseError, parse_diagram, render_configuration, unfold
from src.burrow.pods import Colour, DestRoom, Hallway, StartRoom


class TestParseDiagram:
    def test_canonical_geometry(self, canonical_diagram):
        burrow_map, colours, _ = parse_diagram(canonical_diagram)

        assert burrow_map.hallway_row == 1
        assert burrow_map.hallway_span == (1, 11)
        assert burrow_map.room_columns == (3, 5, 7, 9)
        assert burrow_map.room_depth == 2
        assert len(colours) == 8

    def test_pods_indexed_in_reading_order(self, canonical_diagram):
        _, colours, _ = parse_diagram(canonical_diagram)

        assert "".join(c.letter for c in colours) == "BCBDADCA"

    def test_pods_already_home_start_settled(self, canonical_diagram):
        _, _, initial = parse_diagram(canonical_diagram)

        assert initial.positions == (
            StartRoom(1, 3),
            StartRoom(1, 5),
            StartRoom(1, 7),
            StartRoom(1, 9),
            DestRoom(2),  # amber at the bottom of its own room
            StartRoom(2, 5),
            DestRoom(2),  # copper at the bottom of its own room
            StartRoom(2, 9),
        )

    def test_settling_stops_at_first_stranger(self, swapped_diagram):
        _, colours, initial = parse_diagram(swapped_diagram)

        settled = [
            colours[i].letter
            for i, position in enumerate(initial)
            if isinstance(position, DestRoom)
        ]
        assert sorted(settled) == ["A", "B", "C", "C", "D", "D"]

    def test_hallway_pod(self, parked_diagram):
        _, colours, initial = parse_diagram(parked_diagram)

        assert colours[0] == Colour.AMBER
        assert initial[0] == Hallway(2)
        assert initial[4] == DestRoom(2)

    def test_unexpected_character(self, canonical_diagram):
        with pytest.raises(ParseError, match="Unexpected character 'E'"):
            parse_diagram(canonical_diagram.replace("#A#D", "#E#D"))

    def test_empty_diagram(self):
        with pytest.raises(ParseError, match="Empty"):
            parse_diagram("")

    def test_no_open_cells(self):
        with pytest.raises(ParseError, match="no open cells"):
            parse_diagram("#####\n#####\n")

    def test_wrong_pod_count(self, canonical_diagram):
        with pytest.raises(ParseError, match="pods of colour A"):
            parse_diagram(canonical_diagram.replace("#C#A#", "#C#B#"))

    def test_unequal_room_depths(self, canonical_diagram):
        with pytest.raises(ParseError, match="unequal depths"):
            parse_diagram(canonical_diagram.replace("#C#A#", "#C###"))

    def test_wrong_room_count(self, canonical_diagram):
        with pytest.raises(ParseError, match="Expected 4 rooms, found 5"):
            parse_diagram(canonical_diagram.replace("#D###", "#D#.#"))

    def test_pod_on_room_entry(self, parked_diagram):
        with pytest.raises(ParseError, match="blocks a room entry"):
            parse_diagram(parked_diagram.replace("#.A...", "#..A.."))

    def test_pod_above_empty_slot(self):
        diagram = "\n".join(
            [
                "#############",
                "#.A.........#",
                "###A#C#B#D###",
                "  #.#D#C#B#",
                "  #########",
            ]
        )
        with pytest.raises(ParseError, match="above an empty slot"):
            parse_diagram(diagram)


class TestUnfold:
    def test_inserts_rows_after_first_room_row(self, canonical_diagram):
        lines = unfold(canonical_diagram).splitlines()

        assert len(lines) == 7
        assert lines[2] == "###B#C#B#D###"
        assert lines[3] == "  #D#C#B#A#"
        assert lines[4] == "  #D#B#A#C#"
        assert lines[5] == "  #A#D#C#A#"

    def test_unfolded_rooms_are_deeper(self, canonical_diagram):
        burrow_map, colours, _ = parse_diagram(unfold(canonical_diagram))

        assert burrow_map.room_depth == 4
        assert len(colours) == 16

    def test_custom_rows(self, canonical_diagram):
        config = BurrowConfig(unfold_rows=("  #A#B#C#D#",))
        burrow_map, _, _ = parse_diagram(unfold(canonical_diagram, config))

        assert burrow_map.room_depth == 3

    def test_too_short(self):
        with pytest.raises(ParseError, match="too short"):
            unfold("#####\n#...#\n")


class TestRender:
    def test_render_matches_input(self, canonical_diagram):
        burrow_map, colours, initial = parse_diagram(canonical_diagram)

        rendered = render_configuration(burrow_map, colours, initial)
        assert rendered == canonical_diagram.rstrip("\n")

    def test_render_moved_pod(self, canonical_diagram):
        burrow_map, colours, initial = parse_diagram(canonical_diagram)
        moved = initial.moved(0, Hallway(1))

        lines = render_configuration(burrow_map, colours, moved).splitlines()
        assert lines[1] == "#B..........#"
        assert lines[2] == "###.#C#B#D###"
