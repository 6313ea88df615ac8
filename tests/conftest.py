import pathlib

import pytest

TESTS_DIR = pathlib.Path(__file__).parent / "data"

SHAPES_HEADER = "shape_id,shape_pt_sequence,shape_pt_lat,shape_pt_lon"


@pytest.fixture
def gtfs_dir(tmp_path):
    """Return a function writing a shapes.txt with the given (lat, lon) rows into a fresh GTFS directory."""
    def _write(rows, header=SHAPES_HEADER, shapes_file="shapes.txt"):
        lines = [header]
        for i, row in enumerate(rows, start=1):
            if isinstance(row, str):
                lines.append(row)
            else:
                lat, lon = row
                lines.append(f"S1,{i},{lat},{lon}")
        (tmp_path / shapes_file).write_text("\n".join(lines) + "\n", encoding="UTF-8")
        return tmp_path

    return _write


@pytest.fixture
def mock_bbox_of_shapes_file(mocker):
    return mocker.patch("gtfsbbox.find_bbox.bbox_of_shapes_file")
