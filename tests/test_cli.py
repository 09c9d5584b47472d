import json

import pandas as pd
import pytest

from qshape.presentation.cli.measure_shape import main, setup_parser


@pytest.fixture
def request_file(tmp_path, octahedron):
    """Write a request JSON file and return a factory for its path."""

    def write(**fields):
        request = {"actualCoordinates": octahedron.tolist(), "mode": "fast", "seed": 0}
        request.update(fields)
        path = tmp_path / "request.json"
        path.write_text(json.dumps(request))
        return str(path)

    return write


def test_parser_defaults():
    args = setup_parser().parse_args(["request.json"])
    assert args.request == "request.json"
    assert args.mode is None
    assert not args.rank


def test_measure_against_table_geometry(request_file, tmp_path):
    output = tmp_path / "response.json"
    status = main([request_file(), "--geometry", "OC-6", "-o", str(output)])

    assert status == 0
    response = json.loads(output.read_text())
    assert response["measure"] < 0.01
    assert len(response["rotation"]) == 16


def test_flexible_flag_adds_scaling(request_file, tmp_path):
    output = tmp_path / "response.json"
    status = main([request_file(), "--geometry", "OC-6", "--flexible", "-o", str(output)])

    assert status == 0
    response = json.loads(output.read_text())
    assert response["flexible"]["scaling"]["description"] == "No scaling"
    assert response["delta"] == pytest.approx(0.0, abs=0.01)

def test_measure_prints_to_stdout(request_file, octahedron, capsys):
    path = request_file(referenceCoordinates=octahedron.tolist())
    assert main([path]) == 0
    response = json.loads(capsys.readouterr().out)
    assert response["measure"] < 0.01


def test_failure_exits_with_status_one(request_file, octahedron, capsys):
    path = request_file(referenceCoordinates=octahedron[:4].tolist())
    assert main([path]) == 1
    response = json.loads(capsys.readouterr().out)
    assert response["errorKind"] == "InvalidInput"


def test_unreadable_request(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert json.loads(capsys.readouterr().out)["errorKind"] == "InvalidInput"


def test_rank_writes_csv(request_file, tmp_path, capsys):
    csv_file = tmp_path / "ranking.csv"
    status = main(
        [request_file(), "--rank", "--workers", "1", "--csv", str(csv_file)]
    )

    assert status == 0
    rankings = json.loads(capsys.readouterr().out)["rankings"]
    assert rankings[0]["geometry"] == "OC-6"
    assert pd.read_csv(csv_file)["geometry"].iloc[0] == "OC-6"


def test_log_file(request_file, tmp_path):
    log_file = tmp_path / "qshape.log"
    status = main([request_file(), "--geometry", "OC-6", "--log-file", str(log_file)])
    assert status == 0
    assert "CShM" in log_file.read_text()
