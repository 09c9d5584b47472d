import numpy as np
import pandas as pd
import pytest

from qshape.core.domain.exceptions import DegenerateGeometryError, SearchCancelledError
from qshape.core.services.ranking_service import (
    GeometryRankingService,
    to_dataframe,
    write_csv,
)
from qshape.core.utils.cancellation import CancellationToken
from qshape.data.reference_geometries import geometries_for


@pytest.fixture
def thread_service():
    return GeometryRankingService(max_workers=2, executor="thread")


def test_octahedron_ranks_first(thread_service, octahedron):
    rankings = thread_service.rank(octahedron, geometries_for(6), mode="fast", seed=0)

    assert len(rankings) == len(geometries_for(6))
    assert rankings[0].code == "OC-6"
    assert rankings[0].interpretation == "Perfect"
    measures = [r.measure for r in rankings]
    assert measures == sorted(measures)


def test_process_pool_ranking(octahedron):
    service = GeometryRankingService(max_workers=2, executor="process")
    rankings = service.rank(octahedron, geometries_for(6)[:3], mode="fast", seed=0)
    assert {r.code for r in rankings} == {g.code for g in geometries_for(6)[:3]}
    assert rankings[0].code == "OC-6"


def test_degenerate_structure_aborts_ranking(thread_service, octahedron):
    bad = octahedron.copy()
    bad[1] = 0.0
    with pytest.raises(DegenerateGeometryError):
        thread_service.rank(bad, geometries_for(6), mode="fast")


def test_cancelled_ranking(thread_service, octahedron):
    token = CancellationToken()
    token.cancel()
    with pytest.raises(SearchCancelledError):
        thread_service.rank(octahedron, geometries_for(6), cancellation=token)


def test_empty_geometry_list(thread_service, octahedron):
    assert thread_service.rank(octahedron, []) == []


def test_unknown_executor():
    with pytest.raises(ValueError):
        GeometryRankingService(executor="gpu")


def test_dataframe_and_csv(thread_service, octahedron, tmp_path):
    rankings = thread_service.rank(octahedron, geometries_for(6), mode="fast", seed=0)

    df = to_dataframe(rankings)
    assert list(df.columns) == [
        "geometry",
        "name",
        "coordination_number",
        "point_group",
        "measure",
        "interpretation",
    ]
    assert df.iloc[0]["geometry"] == "OC-6"

    csv_file = write_csv(rankings, str(tmp_path / "out" / "ranking.csv"))
    loaded = pd.read_csv(csv_file)
    assert len(loaded) == len(rankings)
    assert np.allclose(loaded["measure"], df["measure"])
