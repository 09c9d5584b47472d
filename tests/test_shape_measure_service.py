import numpy as np
import pytest

from qshape.core.domain.exceptions import (
    DegenerateGeometryError,
    InvalidInputError,
    SearchCancelledError,
)
from qshape.core.domain.implementations.hungarian_solver import HungarianSolver
from qshape.core.domain.implementations.rotation_search_engine import (
    is_proper_rotation,
)
from qshape.core.services.shape_measure_service import (
    ShapeMeasureService,
    compute_shape_measure,
    interpret_flexible,
    interpret_measure,
)
from qshape.core.utils.benchmarking import PerformanceStats
from qshape.core.utils.cancellation import CancellationToken
from qshape.core.utils.vector_math import rotation_from_axis_angle
from qshape.data.reference_geometries import REFERENCE_GEOMETRIES, get_geometry


@pytest.fixture
def service():
    return ShapeMeasureService()


@pytest.fixture
def square():
    """Square-planar ligands of side sqrt(2)."""
    return np.array([[1, 0, 0], [0, 1, 0], [-1, 0, 0], [0, -1, 0]], dtype=float)


def test_perfect_octahedron(service, octahedron):
    result = service.compute(octahedron, get_geometry("OC-6"), mode="fast", seed=1)

    assert result.measure < 0.01
    assert result.is_perfect
    assert result.center_appended
    assert result.aligned_coords.shape == (7, 3)
    assert is_proper_rotation(result.rotation)
    assert sorted(j for _, j in result.assignment) == list(range(7))


def test_square_is_far_from_tetrahedron(service, square):
    result = service.compute(square, get_geometry("T-4"), mode="fast", seed=1)
    assert result.measure > 20.0


def test_square_matches_square_planar(service, square):
    result = service.compute(square * 1.9, get_geometry("SP-4"), mode="fast", seed=1)
    assert result.measure < 0.01


def test_point_count_mismatch(service, octahedron):
    with pytest.raises(InvalidInputError):
        service.compute(octahedron[:5], octahedron)


def test_mismatch_against_table_geometry(service, octahedron):
    with pytest.raises(InvalidInputError):
        service.compute(octahedron[:5], get_geometry("OC-6"))


def test_empty_input(service):
    with pytest.raises(InvalidInputError):
        service.compute([], [])


def test_non_finite_input(service, octahedron):
    bad = octahedron.copy()
    bad[2, 1] = np.nan
    with pytest.raises(InvalidInputError):
        service.compute(bad, octahedron)


def test_ligand_on_metal_is_degenerate(service, octahedron):
    bad = octahedron.copy()
    bad[3] = 0.0
    with pytest.raises(DegenerateGeometryError):
        service.compute(bad, get_geometry("OC-6"))


def test_explicit_metal_is_not_degenerate(service, octahedron):
    with_metal = np.vstack([octahedron, np.zeros(3)])
    result = service.compute(
        with_metal, get_geometry("OC-6"), mode="fast", includes_center=True
    )
    assert not result.center_appended
    assert result.measure < 0.01


def test_three_ligands_get_the_metal_appended(service):
    pyramid = get_geometry("vT-3").as_array()
    ligands = pyramid[:3] - pyramid[3]
    raw_reference = [list(p) for p in get_geometry("vT-3").coordinates]

    result = service.compute(ligands, raw_reference, mode="fast", seed=3)
    assert result.center_appended
    assert result.measure < 0.01


def test_two_ligands_get_the_metal_appended(service):
    response = service.compute_response(
        {
            "actualCoordinates": [[2, 0, 0], [0, 2, 0]],
            "referenceCoordinates": [[1, 0, 0], [0, 1, 0], [0, 0, 0]],
            "mode": "fast",
        }
    )
    assert "errorKind" not in response
    assert response["measure"] < 0.01
    assert len(response["alignedCoordinates"]) == 3


def test_ligand_only_reference_drops_explicit_metal(service):
    geometry = get_geometry("IC-12")
    with_metal = np.vstack([geometry.as_array() * 2.1, np.zeros(3)])
    result = service.compute(with_metal, geometry, mode="fast", includes_center=True)
    assert not result.center_appended
    assert result.aligned_coords.shape == (12, 3)
    assert result.measure < 0.01


@pytest.mark.parametrize("code", sorted(REFERENCE_GEOMETRIES))
def test_every_reference_matches_itself(service, code):
    geometry = get_geometry(code)
    result = service.compute(
        geometry.as_array(),
        geometry,
        mode="fast",
        seed=0,
        includes_center=geometry.includes_center,
    )
    assert result.measure < 0.01


def test_invariant_under_rotation_scale_and_permutation(service, rng, random_rotation):
    actual = get_geometry("TBPY-5").as_array()[:5] + rng.normal(scale=0.08, size=(5, 3))
    reference = get_geometry("SPY-5")

    base = service.compute(actual, reference, seed=11).measure

    perm = rng.permutation(5)
    moved = (actual @ random_rotation.T)[perm] * 3.7
    moved_measure = service.compute(moved, reference, seed=12).measure

    assert base > 0.1
    assert moved_measure == pytest.approx(base, abs=0.05)


@pytest.mark.parametrize(
    "actual_code, reference_code",
    [("PBPY-7", "COC-7"), ("CU-8", "SAPR-8"), ("OC-6", "TPR-6"), ("SAPR-8", "TDD-8")],
)
def test_default_mode_is_stable_across_rotations(service, rng, actual_code, reference_code):
    geometry = get_geometry(actual_code)
    actual = geometry.as_array()[:-1]
    reference = get_geometry(reference_code)

    measures = []
    for seed in range(3):
        axis = rng.normal(size=3)
        rotation = rotation_from_axis_angle(axis, rng.uniform(0, 2 * np.pi))[:3, :3]
        rotated = actual @ rotation.T
        measures.append(service.compute(rotated, reference, seed=seed).measure)

    assert max(measures) - min(measures) < 0.05


def test_regular_and_johnson_bipyramids_differ(service):
    actual = get_geometry("TBPY-5").as_array()[:5]
    regular = service.compute(actual, get_geometry("TBPY-5"), seed=2).measure
    johnson = service.compute(actual, get_geometry("JTBPY-5"), seed=2).measure
    assert regular < 0.01
    assert johnson > regular + 0.5


def test_aligned_coordinates_follow_reference_order(service, octahedron):
    rotation = rotation_from_axis_angle([1.0, 2.0, 3.0], 0.4)
    rotated = octahedron @ rotation[:3, :3].T
    geometry = get_geometry("OC-6")
    result = service.compute(rotated, geometry, seed=4)

    assert result.measure < 0.01
    assert np.allclose(result.aligned_coords, result.reference_coords, atol=0.02)


def test_hungarian_solver_gives_same_measure(square):
    default = ShapeMeasureService().compute(square, get_geometry("SS-4"), seed=5)
    hungarian = ShapeMeasureService(solver_factory=HungarianSolver).compute(
        square, get_geometry("SS-4"), seed=5
    )
    assert hungarian.measure == pytest.approx(default.measure, abs=0.05)


def test_optimal_scaling_is_applied(service, square):
    plain = service.compute(square, get_geometry("T-4"), mode="fast", seed=6)
    scaled = service.compute(
        square, get_geometry("T-4"), mode="fast", seed=6, optimal_scaling=True
    )
    assert 0.0 <= scaled.measure <= plain.measure + 0.5


def test_seed_rotations_are_accepted(service, octahedron):
    flat = list(np.eye(4).reshape(16))
    result = service.compute(
        octahedron, get_geometry("OC-6"), mode="fast", seed_rotations=[flat]
    )
    assert result.measure < 0.01


def test_malformed_seed_rotation_is_invalid_input(service, octahedron):
    with pytest.raises(InvalidInputError) as excinfo:
        service.compute(
            octahedron, get_geometry("OC-6"), mode="fast", seed_rotations=[[1.0, 0.0, 0.0]]
        )
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_unknown_mode_is_invalid_input(service, octahedron):
    with pytest.raises(InvalidInputError):
        service.compute(octahedron, get_geometry("OC-6"), mode="exhaustive")


def test_stats_collect_stage_timings(service, square):
    stats = PerformanceStats()
    service.compute(square, get_geometry("T-4"), mode="fast", seed=1, stats=stats)
    assert "Annealing" in stats.stats
    assert "Polish" in stats.stats
    report = stats.report()
    assert "Annealing" in report
    assert "mean" in report and "median" in report


def test_cancellation(service, square):
    token = CancellationToken()
    token.cancel()
    with pytest.raises(SearchCancelledError):
        service.compute(square, get_geometry("T-4"), cancellation=token)


def test_convenience_function(octahedron):
    result = compute_shape_measure(octahedron, get_geometry("OC-6"), mode="fast")
    assert result.measure < 0.01


@pytest.mark.slow
def test_intensive_is_no_worse_than_default(service, rng):
    actual = get_geometry("CU-8").as_array()[:8] + rng.normal(scale=0.15, size=(8, 3))
    reference = get_geometry("SAPR-8")
    default = service.compute(actual, reference, mode="default", seed=8).measure
    intensive = service.compute(actual, reference, mode="intensive", seed=8).measure
    assert intensive <= default + 0.05


@pytest.fixture
def elongated_octahedron(octahedron):
    """Octahedron stretched by half along z."""
    return octahedron * np.array([1.0, 1.0, 1.5])


class TestFlexibleMeasure:
    def test_elongation_is_absorbed_by_scaling(self, service, elongated_octahedron):
        result = service.compute_flexible(
            elongated_octahedron, get_geometry("OC-6"), mode="default", seed=3
        )

        assert result.rigid.measure > 2.0
        assert result.measure < 0.5 * result.rigid.measure
        assert result.delta == pytest.approx(result.rigid.measure - result.measure)
        assert result.improvement > 50.0
        assert result.scaling.distortion > 0.0
        assert result.category not in ("rigid_match", "wrong_geometry")
        assert result.aligned_coords.shape == result.scaled_reference.shape

    def test_perfect_shape_needs_no_scaling(self, service, octahedron):
        result = service.compute_flexible(octahedron, get_geometry("OC-6"), mode="fast", seed=1)

        assert result.measure < 0.01
        assert result.scaling.description == "No scaling"
        assert result.scaling.distortion == pytest.approx(0.0, abs=1e-9)
        assert result.category == "rigid_match"

    def test_rigid_result_is_reused(self, service, elongated_octahedron):
        rigid = service.compute(elongated_octahedron, get_geometry("OC-6"), mode="fast", seed=2)
        stats = PerformanceStats()
        result = service.compute_flexible(
            elongated_octahedron,
            get_geometry("OC-6"),
            mode="fast",
            seed=2,
            rigid_result=rigid,
            stats=stats,
        )

        assert result.rigid is rigid
        assert "Flexible Scaling" in stats.stats
        assert "Grid Search" not in stats.stats
        assert result.measure <= rigid.measure + 1e-9

    def test_wrong_polyhedron_stays_poor(self, service, square):
        result = service.compute_flexible(square, get_geometry("T-4"), mode="fast", seed=1)
        assert result.rigid.measure > 20.0
        assert result.measure <= result.rigid.measure + 1e-9

    def test_flexible_response(self, service, elongated_octahedron):
        response = service.compute_response(
            {
                "actualCoordinates": elongated_octahedron.tolist(),
                "referenceGeometry": "OC-6",
                "mode": "fast",
                "seed": 1,
                "flexible": True,
            }
        )

        assert {"measure", "flexible", "delta", "improvement"} <= set(response)
        assert set(response["flexible"]) == {
            "measure",
            "alignedCoordinates",
            "scaling",
            "category",
        }
        assert set(response["flexible"]["scaling"]) == {
            "sx",
            "sy",
            "sz",
            "distortion",
            "description",
        }
        assert response["flexible"]["measure"] <= response["measure"] + 1e-9


@pytest.mark.parametrize(
    "rigid, flexible, distortion, expected",
    [
        (30.0, 20.0, 10.0, "wrong_geometry"),
        (2.0, 1.5, 10.0, "rigid_match"),
        (40.0, 9.0, 2.0, "slight_distortion"),
        (5.0, 0.5, 3.0, "slight_distortion"),
        (5.0, 0.5, 10.0, "moderate_distortion"),
        (8.0, 0.2, 25.0, "high_distortion"),
    ],
)
def test_interpret_flexible(rigid, flexible, distortion, expected):
    assert interpret_flexible(rigid, flexible, distortion) == expected

class TestWireFormat:
    def test_success_response(self, service, octahedron):
        response = service.compute_response(
            {
                "actualCoordinates": octahedron.tolist(),
                "referenceGeometry": "OC-6",
                "mode": "fast",
                "seed": 1,
            }
        )
        assert set(response) == {"measure", "alignedCoordinates", "rotation"}
        assert response["measure"] < 0.01
        assert len(response["rotation"]) == 16
        assert len(response["alignedCoordinates"]) == 7

    def test_raw_reference_coordinates(self, service, octahedron):
        response = service.compute_response(
            {
                "actualCoordinates": octahedron.tolist(),
                "referenceCoordinates": (octahedron * 5).tolist(),
                "mode": "fast",
            }
        )
        assert response["measure"] < 0.01
        assert len(response["alignedCoordinates"]) == 6

    def test_mismatch_response(self, service, octahedron):
        response = service.compute_response(
            {
                "actualCoordinates": octahedron[:5].tolist(),
                "referenceCoordinates": octahedron.tolist(),
            }
        )
        assert response["errorKind"] == "InvalidInput"
        assert "message" in response

    def test_unknown_mode_response(self, service, octahedron):
        response = service.compute_response(
            {
                "actualCoordinates": octahedron.tolist(),
                "referenceCoordinates": octahedron.tolist(),
                "mode": "exhaustive",
            }
        )
        assert response["errorKind"] == "InvalidInput"

    def test_unknown_geometry_response(self, service, octahedron):
        response = service.compute_response(
            {"actualCoordinates": octahedron.tolist(), "referenceGeometry": "XX-6"}
        )
        assert response["errorKind"] == "InvalidInput"

    def test_degenerate_response(self, service, octahedron):
        bad = octahedron.copy()
        bad[0] = 0.0
        response = service.compute_response(
            {"actualCoordinates": bad.tolist(), "referenceGeometry": "OC-6"}
        )
        assert response["errorKind"] == "DegenerateGeometry"

    def test_cancelled_response(self, service, octahedron):
        token = CancellationToken()
        token.cancel()
        response = service.compute_response(
            {"actualCoordinates": octahedron.tolist(), "referenceGeometry": "OC-6"},
            cancellation=token,
        )
        assert response["errorKind"] == "Cancelled"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "Perfect"),
        (0.3, "Excellent"),
        (1.0, "Very Good"),
        (2.0, "Good"),
        (5.0, "Moderate"),
        (10.0, "Poor"),
        (40.0, "Very Poor / No Match"),
        (float("inf"), "Invalid"),
    ],
)
def test_interpret_measure(value, expected):
    assert interpret_measure(value) == expected
