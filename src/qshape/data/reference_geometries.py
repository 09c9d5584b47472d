"""
Ideal reference polyhedra for coordination numbers 2 to 12.

Coordinates follow the SHAPE 2.1 / cosymlib ``ideal_structures_center``
conventions for CN 2 to 9: each entry lists the ligand vertices relative to
the central atom, followed by the central atom as its last point. The CN 10
to 12 entries come from ``ideal_structures`` and list the ligand vertices
only. Entries are normalized when used, not here.
"""

import math
from typing import Dict, List

from ..core.domain.models.reference_geometry import ReferenceGeometry

_C = (0.0, 0.0, 0.0)


def _geometry(code, name, point_group, *vertices):
    return ReferenceGeometry(
        code=code,
        name=name,
        coordination_number=len(vertices) - 1,
        point_group=point_group,
        coordinates=tuple(tuple(float(x) for x in v) for v in vertices),
        includes_center=True,
    )


def _ligands(code, name, point_group, *vertices):
    return ReferenceGeometry(
        code=code,
        name=name,
        coordination_number=len(vertices),
        point_group=point_group,
        coordinates=tuple(tuple(float(x) for x in v) for v in vertices),
        includes_center=False,
    )


def _regular_polygon(n):
    return [
        (math.cos(2 * math.pi * i / n), math.sin(2 * math.pi * i / n), 0.0)
        for i in range(n)
    ]


_TABLE = [
    # CN=2
    _geometry("L-2", "Linear", "D∞h", (1.0, 0.0, 0.0), (-1.0, 0.0, 0.0), _C),
    _geometry(
        "vT-2",
        "Divacant tetrahedron (V-shape, 109.47°)",
        "C2v",
        (0.816496580928, 0.0, 0.577350269190),
        (-0.816496580928, 0.0, 0.577350269190),
        _C,
    ),
    _geometry(
        "vOC-2",
        "Tetravacant octahedron (L-shape, 90°)",
        "C2v",
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        _C,
    ),
    # CN=3
    _geometry(
        "TP-3",
        "Trigonal planar",
        "D3h",
        (1.154700538379, 0.0, 0.0),
        (-0.577350269190, 1.0, 0.0),
        (-0.577350269190, -1.0, 0.0),
        _C,
    ),
    _geometry(
        "vT-3",
        "Vacant tetrahedron (trigonal pyramid)",
        "C3v",
        (1.137070487230, 0.0, 0.100503781526),
        (-0.568535243615, 0.984731927835, 0.100503781526),
        (-0.568535243615, -0.984731927835, 0.100503781526),
        (0.0, 0.0, -0.301511344578),
    ),
    _geometry(
        "fac-vOC-3",
        "fac-Trivacant octahedron",
        "C3v",
        (1.0, -0.333333333333, -0.333333333333),
        (-0.333333333333, 1.0, -0.333333333333),
        (-0.333333333333, -0.333333333333, 1.0),
        (-0.333333333333, -0.333333333333, -0.333333333333),
    ),
    _geometry(
        "mer-vOC-3",
        "mer-Trivacant octahedron (T-shape)",
        "C2v",
        (1.206045378311, -0.301511344578, 0.0),
        (0.0, 0.904534033733, 0.0),
        (-1.206045378311, -0.301511344578, 0.0),
        (0.0, -0.301511344578, 0.0),
    ),
    # CN=4
    _geometry(
        "SP-4",
        "Square planar",
        "D4h",
        (1.118033988750, 0.0, 0.0),
        (0.0, 1.118033988750, 0.0),
        (-1.118033988750, 0.0, 0.0),
        (0.0, -1.118033988750, 0.0),
        _C,
    ),
    _geometry(
        "T-4",
        "Tetrahedron",
        "Td",
        (0.0, 0.912870929175, -0.645497224368),
        (0.0, -0.912870929175, -0.645497224368),
        (0.912870929175, 0.0, 0.645497224368),
        (-0.912870929175, 0.0, 0.645497224368),
        _C,
    ),
    _geometry(
        "SS-4",
        "Seesaw",
        "C2v",
        (-0.235702260396, -0.235702260396, -1.178511301978),
        (0.942809041582, -0.235702260396, 0.0),
        (-0.235702260396, 0.942809041582, 0.0),
        (-0.235702260396, -0.235702260396, 1.178511301978),
        (-0.235702260396, -0.235702260396, 0.0),
    ),
    _geometry(
        "vTBPY-4",
        "Axially vacant trigonal bipyramid",
        "C3v",
        (0.0, 0.0, -0.917662935482),
        (1.147078669353, 0.0, 0.229415733871),
        (-0.573539334676, 0.993399267799, 0.229415733871),
        (-0.573539334676, -0.993399267799, 0.229415733871),
        (0.0, 0.0, 0.229415733871),
    ),
    # CN=5
    _geometry(
        "PP-5",
        "Pentagon",
        "D5h",
        (1.095445115010, 0.0, 0.0),
        (0.338511156943, 1.041830214874, 0.0),
        (-0.886233714448, 0.643886483299, 0.0),
        (-0.886233714448, -0.643886483299, 0.0),
        (0.338511156943, -1.041830214874, 0.0),
        _C,
    ),
    _geometry(
        "vOC-5",
        "Vacant octahedron (Johnson square pyramid, J1)",
        "C4v",
        (0.0, 0.0, -0.928476690885),
        (1.114172029062, 0.0, 0.185695338177),
        (0.0, 1.114172029062, 0.185695338177),
        (-1.114172029062, 0.0, 0.185695338177),
        (0.0, -1.114172029062, 0.185695338177),
        (0.0, 0.0, 0.185695338177),
    ),
    _geometry(
        "TBPY-5",
        "Trigonal bipyramid",
        "D3h",
        (0.0, 0.0, -1.095445115010),
        (1.095445115010, 0.0, 0.0),
        (-0.547722557505, 0.948683298051, 0.0),
        (-0.547722557505, -0.948683298051, 0.0),
        (0.0, 0.0, 1.095445115010),
        _C,
    ),
    _geometry(
        "SPY-5",
        "Spherical square pyramid",
        "C4v",
        (0.0, 0.0, 1.095445115010),
        (1.060660171780, 0.0, -0.273861278753),
        (0.0, 1.060660171780, -0.273861278753),
        (-1.060660171780, 0.0, -0.273861278753),
        (0.0, -1.060660171780, -0.273861278753),
        _C,
    ),
    _geometry(
        "JTBPY-5",
        "Johnson trigonal bipyramid (J12)",
        "D3h",
        (0.925820099773, 0.0, 0.0),
        (-0.462910049886, 0.801783725737, 0.0),
        (-0.462910049886, -0.801783725737, 0.0),
        (0.0, 0.0, 1.309307341416),
        (0.0, 0.0, -1.309307341416),
        _C,
    ),
    # CN=6
    _geometry(
        "HP-6",
        "Hexagon",
        "D6h",
        (1.080123449735, 0.0, 0.0),
        (0.540061724867, 0.935414346693, 0.0),
        (-0.540061724867, 0.935414346693, 0.0),
        (-1.080123449735, 0.0, 0.0),
        (-0.540061724867, -0.935414346693, 0.0),
        (0.540061724867, -0.935414346693, 0.0),
        _C,
    ),
    _geometry(
        "PPY-6",
        "Pentagonal pyramid",
        "C5v",
        (0.0, 0.0, -0.937042571332),
        (1.093216333220, 0.0, 0.156173761889),
        (0.337822425493, 1.039710517429, 0.156173761889),
        (-0.884430592103, 0.642576438232, 0.156173761889),
        (-0.884430592103, -0.642576438232, 0.156173761889),
        (0.337822425493, -1.039710517429, 0.156173761889),
        (0.0, 0.0, 0.156173761889),
    ),
    _geometry(
        "OC-6",
        "Octahedron",
        "Oh",
        (0.0, 0.0, -1.080123449735),
        (1.080123449735, 0.0, 0.0),
        (0.0, 1.080123449735, 0.0),
        (-1.080123449735, 0.0, 0.0),
        (0.0, -1.080123449735, 0.0),
        (0.0, 0.0, 1.080123449735),
        _C,
    ),
    _geometry(
        "TPR-6",
        "Trigonal prism",
        "D3h",
        (0.816496580928, 0.0, -0.707106781187),
        (-0.408248290464, 0.707106781187, -0.707106781187),
        (-0.408248290464, -0.707106781187, -0.707106781187),
        (0.816496580928, 0.0, 0.707106781187),
        (-0.408248290464, 0.707106781187, 0.707106781187),
        (-0.408248290464, -0.707106781187, 0.707106781187),
        _C,
    ),
    _geometry(
        "JPPY-6",
        "Johnson pentagonal pyramid (J2)",
        "C5v",
        (1.146281780821, 0.0, 0.101205871605),
        (0.354220550616, 1.090178757161, 0.101205871605),
        (-0.927361441027, 0.673767525738, 0.101205871605),
        (-0.927361441027, -0.673767525738, 0.101205871605),
        (0.354220550616, -1.090178757161, 0.101205871605),
        (0.0, 0.0, -0.607235229628),
        (0.0, 0.0, 0.101205871605),
    ),
    # CN=7
    _geometry(
        "HP-7",
        "Heptagon",
        "D7h",
        (1.069044967650, 0.0, 0.0),
        (0.666538635058, 0.835813011883, 0.0),
        (-0.237884884643, 1.042241778339, 0.0),
        (-0.963176234240, 0.463841227849, 0.0),
        (-0.963176234240, -0.463841227849, 0.0),
        (-0.237884884643, -1.042241778339, 0.0),
        (0.666538635058, -0.835813011883, 0.0),
        _C,
    ),
    _geometry(
        "HPY-7",
        "Hexagonal pyramid",
        "C6v",
        (0.0, 0.0, -0.943879807449),
        (1.078719779941, 0.0, 0.134839972493),
        (0.539359889971, 0.934198732994, 0.134839972493),
        (-0.539359889971, 0.934198732994, 0.134839972493),
        (-1.078719779941, 0.0, 0.134839972493),
        (-0.539359889971, -0.934198732994, 0.134839972493),
        (0.539359889971, -0.934198732994, 0.134839972493),
        (0.0, 0.0, 0.134839972493),
    ),
    _geometry(
        "PBPY-7",
        "Pentagonal bipyramid",
        "D5h",
        (0.0, 0.0, -1.069044967650),
        (1.069044967650, 0.0, 0.0),
        (0.330353062755, 1.016722182696, 0.0),
        (-0.864875546580, 0.628368866022, 0.0),
        (-0.864875546580, -0.628368866022, 0.0),
        (0.330353062755, -1.016722182696, 0.0),
        (0.0, 0.0, 1.069044967650),
        _C,
    ),
    _geometry(
        "COC-7",
        "Capped octahedron",
        "C3v",
        (0.0, 0.0, 1.128906708829),
        (0.0, -1.046937018035, 0.283078548570),
        (0.906674032650, 0.523468509017, 0.283078548570),
        (-0.906674032650, 0.523468509017, 0.283078548570),
        (0.672964536915, -0.388536257092, -0.678734552207),
        (-0.672964536915, -0.388536257092, -0.678734552207),
        (0.0, 0.777072514184, -0.678734552207),
        (0.0, 0.0, 0.058061302083),
    ),
    _geometry(
        "CTPR-7",
        "Capped trigonal prism",
        "C2v",
        (0.0, 0.0, 1.020027096827),
        (0.735247575071, 0.735247575071, 0.203750780644),
        (-0.735247575071, 0.735247575071, 0.203750780644),
        (0.735247575071, -0.735247575071, 0.203750780644),
        (-0.735247575071, -0.735247575071, 0.203750780644),
        (0.660960557032, 0.0, -0.892328424325),
        (-0.660960557032, 0.0, -0.892328424325),
        (0.0, 0.0, -0.050373370753),
    ),
    _geometry(
        "JPBPY-7",
        "Johnson pentagonal bipyramid (J13)",
        "D5h",
        (1.178109256681, 0.0, 0.0),
        (0.364055781545, 1.120448485474, 0.0),
        (-0.953110409886, 0.692475246666, 0.0),
        (-0.953110409886, -0.692475246666, 0.0),
        (0.364055781545, -1.120448485474, 0.0),
        (0.0, 0.0, 0.728111563090),
        (0.0, 0.0, -0.728111563090),
        _C,
    ),
    _geometry(
        "JETPY-7",
        "Elongated triangular pyramid (J7)",
        "C3v",
        (0.729093431342, 0.0, 0.423600026760),
        (0.729093431342, 0.0, -0.839226839789),
        (-0.364546715671, 0.631413433275, 0.423600026760),
        (-0.364546715671, 0.631413433275, -0.839226839789),
        (-0.364546715671, -0.631413433275, 0.423600026760),
        (-0.364546715671, -0.631413433275, -0.839226839789),
        (0.0, 0.0, 1.454693845602),
        (0.0, 0.0, -0.207813406515),
    ),
    # CN=8
    _geometry(
        "OP-8",
        "Octagon",
        "D8h",
        (1.060660171780, 0.0, 0.0),
        (0.75, 0.75, 0.0),
        (0.0, 1.060660171780, 0.0),
        (-0.75, 0.75, 0.0),
        (-1.060660171780, 0.0, 0.0),
        (-0.75, -0.75, 0.0),
        (0.0, -1.060660171780, 0.0),
        (0.75, -0.75, 0.0),
        _C,
    ),
    _geometry(
        "HPY-8",
        "Heptagonal pyramid",
        "C7v",
        (0.0, 0.0, -0.949425326555),
        (1.068103492374, 0.0, 0.118678165819),
        (0.665951634825, 0.835076936872, 0.118678165819),
        (-0.237675386685, 1.041323907815, 0.118678165819),
        (-0.962327994327, 0.463432737036, 0.118678165819),
        (-0.962327994327, -0.463432737036, 0.118678165819),
        (-0.237675386685, -1.041323907815, 0.118678165819),
        (0.665951634825, -0.835076936872, 0.118678165819),
        (0.0, 0.0, 0.118678165819),
    ),
    _geometry(
        "HBPY-8",
        "Hexagonal bipyramid",
        "D6h",
        (0.0, 0.0, -1.060660171780),
        (1.060660171780, 0.0, 0.0),
        (0.530330085890, 0.918558653544, 0.0),
        (-0.530330085890, 0.918558653544, 0.0),
        (-1.060660171780, 0.0, 0.0),
        (-0.530330085890, -0.918558653544, 0.0),
        (0.530330085890, -0.918558653544, 0.0),
        (0.0, 0.0, 1.060660171780),
        _C,
    ),
    _geometry(
        "CU-8",
        "Cube",
        "Oh",
        (0.866025403784, 0.0, -0.612372435696),
        (0.0, 0.866025403784, -0.612372435696),
        (-0.866025403784, 0.0, -0.612372435696),
        (0.0, -0.866025403784, -0.612372435696),
        (0.866025403784, 0.0, 0.612372435696),
        (0.0, 0.866025403784, 0.612372435696),
        (-0.866025403784, 0.0, 0.612372435696),
        (0.0, -0.866025403784, 0.612372435696),
        _C,
    ),
    _geometry(
        "SAPR-8",
        "Square antiprism",
        "D4d",
        (0.644649377827, 0.644649377827, -0.542083350910),
        (-0.644649377827, 0.644649377827, -0.542083350910),
        (-0.644649377827, -0.644649377827, -0.542083350910),
        (0.644649377827, -0.644649377827, -0.542083350910),
        (0.911671893098, 0.0, 0.542083350910),
        (0.0, 0.911671893098, 0.542083350910),
        (-0.911671893098, 0.0, 0.542083350910),
        (0.0, -0.911671893098, 0.542083350910),
        _C,
    ),
    _geometry(
        "TDD-8",
        "Triangular dodecahedron",
        "D2d",
        (-0.636106245143, 0.0, 0.848768388024),
        (-0.000000009579, -0.993210924257, 0.372146720241),
        (0.636106254722, 0.0, 0.848768388024),
        (-0.000000009579, 0.993210924257, 0.372146720241),
        (-0.993210876363, 0.0, -0.372146742591),
        (-0.000000009579, -0.636106206828, -0.848768374454),
        (0.993210914678, 0.0, -0.372146742591),
        (-0.000000009579, 0.636106206828, -0.848768374454),
        (-0.000000009579, 0.0, 0.000000017561),
    ),
    _geometry(
        "JGBF-8",
        "Gyrobifastigium (J26)",
        "D2d",
        (0.612372435696, 0.0, 1.06066017178),
        (-0.612372435696, 0.0, 1.06066017178),
        (0.612372435696, 0.612372435696, 0.0),
        (0.612372435696, -0.612372435696, 0.0),
        (-0.612372435696, -0.612372435696, 0.0),
        (-0.612372435696, 0.612372435696, 0.0),
        (0.0, 0.612372435696, -1.06066017178),
        (0.0, -0.612372435696, -1.06066017178),
        _C,
    ),
    _geometry(
        "JETBPY-8",
        "Johnson elongated triangular bipyramid (J14)",
        "D3h",
        (0.656233980527, 0.0, 0.568315297963),
        (0.656233980527, 0.0, -0.568315297963),
        (-0.328116990263, 0.568315297963, 0.568315297963),
        (-0.328116990263, 0.568315297963, -0.568315297963),
        (-0.328116990263, -0.568315297963, 0.568315297963),
        (-0.328116990263, -0.568315297963, -0.568315297963),
        (0.0, 0.0, 1.496370293314),
        (0.0, 0.0, -1.496370293314),
        _C,
    ),
    _geometry(
        "JBTP-8",
        "Johnson biaugmented trigonal prism (J50)",
        "C2v",
        (0.647117793293, 0.0, 0.604029879248),
        (-0.647117793293, 0.0, 0.604029879248),
        (0.647117793293, 0.647117793293, -0.516811012319),
        (-0.647117793293, 0.647117793293, -0.516811012319),
        (0.647117793293, -0.647117793293, -0.516811012319),
        (-0.647117793293, -0.647117793293, -0.516811012319),
        (0.0, 1.116113113681, 0.501190825503),
        (0.0, -1.116113113681, 0.501190825503),
        (0.0, 0.0, -0.143197360226),
    ),
    _geometry(
        "BTPR-8",
        "Biaugmented trigonal prism",
        "C2v",
        (0.699237877649, 0.0, 0.688732178156),
        (-0.699237877649, 0.0, 0.688732178156),
        (0.699237877649, 0.699237877649, -0.522383347216),
        (-0.699237877649, 0.699237877649, -0.522383347216),
        (0.699237877649, -0.699237877649, -0.522383347216),
        (-0.699237877649, -0.699237877649, -0.522383347216),
        (0.0, 0.925004726938, 0.415373590668),
        (0.0, -0.925004726938, 0.415373590668),
        (0.0, 0.0, -0.118678148784),
    ),
    _geometry(
        "JSD-8",
        "Snub disphenoid (J84)",
        "D2d",
        (-0.652225622594, 0.0, -1.022598826988),
        (0.652225622594, 0.0, -1.022598826988),
        (0.840828401428, 0.0, 0.268145244516),
        (-0.840828401428, 0.0, 0.268145244516),
        (0.0, -0.652225622594, 1.022598102293),
        (0.0, 0.652225622594, 1.022598102293),
        (0.0, -0.840828401428, -0.26814466476),
        (0.0, 0.840828401428, -0.26814466476),
        (0.0, 0.0, 0.000000289878),
    ),
    _geometry(
        "TT-8",
        "Triakis tetrahedron",
        "Td",
        (0.0, 0.0, 0.951989349863),
        (-0.897415499947, 0.0, -0.317824238862),
        (0.448707702372, -0.777184634355, -0.317824238862),
        (0.448707702372, 0.777184634355, -0.317824238862),
        (0.0, 0.0, -1.159193629094),
        (1.092673129412, 0.0, 0.386903234355),
        (-0.546336517105, 0.946282696936, 0.386903234355),
        (-0.546336517105, -0.946282696936, 0.386903234355),
        (0.0, 0.0, -0.000032707247),
    ),
    _geometry(
        "ETBPY-8",
        "Elongated trigonal bipyramid",
        "D3h",
        (0.656233980527, 0.0, 0.568315297963),
        (0.656233980527, 0.0, -0.568315297963),
        (-0.328116990263, 0.568315297963, 0.568315297963),
        (-0.328116990263, 0.568315297963, -0.568315297963),
        (-0.328116990263, -0.568315297963, 0.568315297963),
        (-0.328116990263, -0.568315297963, -0.568315297963),
        (0.0, 0.0, 1.496370293314),
        (0.0, 0.0, -1.496370293314),
        _C,
    ),
    # CN=9
    _geometry(
        "EP-9",
        "Enneagon",
        "D9h",
        (1.054092553389, 0.0, 0.0),
        (0.807481743057, 0.677557632782, 0.0),
        (0.183041250988, 1.03807851897, 0.0),
        (-0.527046276695, 0.912870929175, 0.0),
        (-0.990522994045, 0.360520886189, 0.0),
        (-0.990522994045, -0.360520886189, 0.0),
        (-0.527046276695, -0.912870929175, 0.0),
        (0.183041250988, -1.03807851897, 0.0),
        (0.807481743057, -0.677557632782, 0.0),
        _C,
    ),
    _geometry(
        "OPY-9",
        "Octagonal pyramid",
        "C8v",
        (0.0, 0.0, -0.953998092006),
        (1.059997880006, 0.0, 0.105999788001),
        (0.749531688996, 0.749531688996, 0.105999788001),
        (0.0, 1.059997880006, 0.105999788001),
        (-0.749531688996, 0.749531688996, 0.105999788001),
        (-1.059997880006, 0.0, 0.105999788001),
        (-0.749531688996, -0.749531688996, 0.105999788001),
        (0.0, -1.059997880006, 0.105999788001),
        (0.749531688996, -0.749531688996, 0.105999788001),
        (0.0, 0.0, 0.105999788001),
    ),
    _geometry(
        "HBPY-9",
        "Heptagonal bipyramid",
        "D7h",
        (0.0, 0.0, -1.054092553389),
        (1.054092553389, 0.0, 0.0),
        (0.657215957254, 0.824122743675, 0.0),
        (-0.234557659457, 1.027664252322, 0.0),
        (-0.949704574492, 0.457353618441, 0.0),
        (-0.949704574492, -0.457353618441, 0.0),
        (-0.234557659457, -1.027664252322, 0.0),
        (0.657215957254, -0.824122743675, 0.0),
        (0.0, 0.0, 1.054092553389),
        _C,
    ),
    _geometry(
        "JTC-9",
        "Johnson triangular cupola (J3)",
        "C3v",
        (1.09108945118, 0.0, 0.267261241912),
        (0.54554472559, 0.944911182523, 0.267261241912),
        (-0.54554472559, 0.944911182523, 0.267261241912),
        (-1.09108945118, 0.0, 0.267261241912),
        (-0.54554472559, -0.944911182523, 0.267261241912),
        (0.54554472559, -0.944911182523, 0.267261241912),
        (0.54554472559, 0.314970394174, -0.623609564462),
        (-0.54554472559, 0.314970394174, -0.623609564462),
        (0.0, -0.629940788349, -0.623609564462),
        (0.0, 0.0, 0.267261241912),
    ),
    _geometry(
        "JCCU-9",
        "Capped cube (J8)",
        "C4v",
        (0.82696065205, 0.0, 0.44357847115),
        (0.82696065205, 0.0, -0.725920498528),
        (0.0, 0.82696065205, 0.44357847115),
        (0.0, 0.82696065205, -0.725920498528),
        (-0.82696065205, 0.0, 0.44357847115),
        (-0.82696065205, 0.0, -0.725920498528),
        (0.0, -0.82696065205, 0.44357847115),
        (0.0, -0.82696065205, -0.725920498528),
        (0.0, 0.0, 1.2705391232),
        (0.0, 0.0, -0.141171013689),
    ),
    _geometry(
        "CCU-9",
        "Spherical-relaxed capped cube",
        "C4v",
        (0.676580145336, 0.676580145336, 0.433150734305),
        (0.676580145336, -0.676580145336, 0.433150734305),
        (-0.676580145336, 0.676580145336, 0.433150734305),
        (-0.676580145336, -0.676580145336, 0.433150734305),
        (0.567844822329, 0.567844822329, -0.692079759449),
        (0.567844822329, -0.567844822329, -0.692079759449),
        (-0.567844822329, 0.567844822329, -0.692079759449),
        (-0.567844822329, -0.567844822329, -0.692079759449),
        (0.0, 0.0, 1.044926731187),
        (0.0, 0.0, -0.009210630612),
    ),
    _geometry(
        "JCSAPR-9",
        "Capped square antiprism (J10)",
        "C4v",
        (0.87314064349, 0.0, 0.658403850449),
        (0.617403669941, 0.617403669941, -0.379941215187),
        (0.0, 0.87314064349, 0.658403850449),
        (-0.617403669941, 0.617403669941, -0.379941215187),
        (-0.87314064349, 0.0, 0.658403850449),
        (-0.617403669941, -0.617403669941, -0.379941215187),
        (0.0, -0.87314064349, 0.658403850449),
        (0.617403669941, -0.617403669941, -0.379941215187),
        (0.0, 0.0, -1.253081858677),
        (0.0, 0.0, 0.139231317631),
    ),
    _geometry(
        "CSAPR-9",
        "Spherical capped square antiprism",
        "C4v",
        (0.0, 0.0, 1.053083142672),
        (0.982653581851, 0.0, 0.38044015658),
        (0.0, 0.982653581851, 0.38044015658),
        (-0.982653581851, 0.0, 0.38044015658),
        (0.0, -0.982653581851, 0.38044015658),
        (0.59091969017, 0.59091969017, -0.643458455172),
        (-0.59091969017, 0.59091969017, -0.643458455172),
        (-0.59091969017, -0.59091969017, -0.643458455172),
        (0.59091969017, -0.59091969017, -0.643458455172),
        (0.0, 0.0, -0.001009948303),
    ),
    _geometry(
        "JTCTPR-9",
        "Tricapped trigonal prism (J51)",
        "D3h",
        (0.621382007554, 0.621382007554, 0.358755069151),
        (-0.621382007554, 0.621382007554, 0.358755069151),
        (0.621382007554, -0.621382007554, 0.358755069151),
        (-0.621382007554, -0.621382007554, 0.358755069151),
        (0.0, 0.621382007554, -0.717510138861),
        (0.0, -0.621382007554, -0.717510138861),
        (1.071725432946, 0.0, -0.618760966112),
        (-1.071725432946, 0.0, -0.618760966112),
        (0.0, 0.0, 1.237521933529),
        (0.0, 0.0, -0.000000000186),
    ),
    _geometry(
        "TCTPR-9",
        "Spherical tricapped trigonal prism",
        "D3h",
        (0.702728368926, 0.0, 0.785674201318),
        (-0.351364184463, 0.60858061945, 0.785674201318),
        (-0.351364184463, -0.60858061945, 0.785674201318),
        (0.702728368926, 0.0, -0.785674201318),
        (-0.351364184463, 0.60858061945, -0.785674201318),
        (-0.351364184463, -0.60858061945, -0.785674201318),
        (-1.054092553389, 0.0, 0.0),
        (0.527046276695, 0.912870929175, 0.0),
        (0.527046276695, -0.912870929175, 0.0),
        _C,
    ),
    _geometry(
        "JTDIC-9",
        "Tridiminished icosahedron (J63)",
        "C3v",
        (-0.262672206048, 0.919451307875, -0.425012557285),
        (-0.91528654885, 0.021204725402, -0.425012557285),
        (-0.262672206048, -0.877041857071, -0.425012557285),
        (0.793279982152, -0.533942192845, -0.425012557285),
        (0.973658150194, 0.021204725402, 0.519459792237),
        (0.321043807391, 0.919451307875, 0.519459792237),
        (-0.734908380808, -0.533942192845, 0.519459792237),
        (0.029185800672, 0.021204725402, -1.008728570724),
        (0.029185800672, 0.021204725402, 1.103175805676),
        (0.029185800672, 0.021204725402, 0.047223617476),
    ),
    _geometry(
        "HH-9",
        "Hula-hoop",
        "C2v",
        (1.057244898055, 0.0, 0.077395698145),
        (0.528622449027, 0.915600935736, 0.077395698145),
        (-0.528622449027, 0.915600935736, 0.077395698145),
        (-1.057244898055, 0.0, 0.077395698145),
        (-0.528622449027, -0.915600935736, 0.077395698145),
        (0.528622449027, -0.915600935736, 0.077395698145),
        (0.0, 0.0, 1.1346405962),
        (0.528622449027, 0.0, -0.838205241608),
        (-0.528622449027, 0.0, -0.838205241608),
        (0.0, 0.0, 0.077395698145),
    ),
    _geometry(
        "MFF-9",
        "Muffin",
        "Cs",
        (0.0, 1.042109568232, 0.212992870476),
        (0.990863900028, 0.322171619609, 0.212992870476),
        (0.61240043265, -0.842614003292, 0.212992870476),
        (-0.61240043265, -0.842614003292, 0.212992870476),
        (-0.990863900028, 0.322171619609, 0.212992870476),
        (-0.61240043265, -0.35416341821, -0.737452600997),
        (0.61240043265, -0.35416341821, -0.737452600997),
        (0.0, 0.70651413114, -0.737452600997),
        (0.0, 0.000293952208, 1.100973497819),
        (0.0, 0.000293952208, 0.046419952795),
    ),
    # CN=10
    _ligands("DP-10", "Decagon", "D10h", *_regular_polygon(10)),
    _ligands(
        "EPY-10",
        "Enneagonal pyramid",
        "C9v",
        (0.0, 0.0, -0.957826),
        (1.053609, 0.0, 0.095783),
        (0.807111, 0.677247, 0.095783),
        (0.182957, 1.037602, 0.095783),
        (-0.526804, 0.912452, 0.095783),
        (-0.990069, 0.360355, 0.095783),
        (-0.990069, -0.360355, 0.095783),
        (-0.526804, -0.912452, 0.095783),
        (0.182957, -1.037602, 0.095783),
        (0.807111, -0.677247, 0.095783),
    ),
    _ligands(
        "OBPY-10",
        "Octagonal bipyramid",
        "D8h",
        (0.0, 0.0, -1.048809),
        (1.048809, 0.0, 0.0),
        (0.74162, 0.74162, 0.0),
        (0.0, 1.048809, 0.0),
        (-0.74162, 0.74162, 0.0),
        (-1.048809, 0.0, 0.0),
        (-0.74162, -0.74162, 0.0),
        (0.0, -1.048809, 0.0),
        (0.74162, -0.74162, 0.0),
        (0.0, 0.0, 1.048809),
    ),
    _ligands(
        "PPR-10",
        "Pentagonal prism",
        "D5h",
        (0.904182, 0.0, -0.531465),
        (0.279408, 0.859928, -0.531465),
        (-0.731499, 0.531465, -0.531465),
        (-0.731499, -0.531465, -0.531465),
        (0.279408, -0.859928, -0.531465),
        (0.904182, 0.0, 0.531465),
        (0.279408, 0.859928, 0.531465),
        (-0.731499, 0.531465, 0.531465),
        (-0.731499, -0.531465, 0.531465),
        (0.279408, -0.859928, 0.531465),
    ),
    _ligands(
        "PAPR-10",
        "Pentagonal antiprism",
        "D5d",
        (0.758925, 0.551391, -0.469042),
        (-0.289884, 0.89217, -0.469042),
        (-0.938083, 0.0, -0.469042),
        (-0.289884, -0.89217, -0.469042),
        (0.758925, -0.551391, -0.469042),
        (0.938083, 0.0, 0.469042),
        (0.289884, 0.89217, 0.469042),
        (-0.758925, 0.551391, 0.469042),
        (-0.758925, -0.551391, 0.469042),
        (0.289884, -0.89217, 0.469042),
    ),
    _ligands(
        "JBCCU-10",
        "Bicapped cube (J15)",
        "D4h",
        (0.785488, 0.0, 0.555424),
        (0.785488, 0.0, -0.555424),
        (0.0, 0.785488, 0.555424),
        (0.0, 0.785488, -0.555424),
        (-0.785488, 0.0, 0.555424),
        (-0.785488, 0.0, -0.555424),
        (0.0, -0.785488, 0.555424),
        (0.0, -0.785488, -0.555424),
        (0.0, 0.0, 1.340913),
        (0.0, 0.0, -1.340913),
    ),
    _ligands(
        "JBCSAPR-10",
        "Bicapped square antiprism (J17)",
        "D4d",
        (0.831395, 0.0, 0.49435),
        (0.587885, 0.587885, -0.49435),
        (0.0, 0.831395, 0.49435),
        (-0.587885, 0.587885, -0.49435),
        (-0.831395, 0.0, 0.49435),
        (-0.587885, -0.587885, -0.49435),
        (0.0, -0.831395, 0.49435),
        (0.587885, -0.587885, -0.49435),
        (0.0, 0.0, 1.325745),
        (0.0, 0.0, -1.325745),
    ),
    _ligands(
        "JMBIC-10",
        "Metabidiminished icosahedron (J62)",
        "C2v",
        (-0.797541, -0.588213, -0.373113),
        (-0.917507, 0.299842, 0.279142),
        (-0.042218, 0.961291, 0.121562),
        (0.15186, -0.475674, -0.933829),
        (0.548711, -0.584891, 0.811695),
        (-0.085441, 0.301899, 1.011328),
        (0.108597, -1.135033, -0.043961),
        (0.863981, 0.414498, 0.450639),
        (-0.482332, 0.411183, -0.734149),
        (0.618676, 0.482007, -0.628091),
    ),
    _ligands(
        "JATDI-10",
        "Augmented tridiminished icosahedron (J64)",
        "C3v",
        (-0.00138, -0.28782, -0.953537),
        (-0.508204, -0.874651, -0.286524),
        (0.005406, -0.863863, 0.597917),
        (0.829615, -0.270393, 0.477497),
        (0.508402, 0.681753, 0.28691),
        (-0.005208, 0.670964, -0.597531),
        (-0.825215, -0.278511, 0.481717),
        (0.514536, -0.869597, -0.289125),
        (-0.514338, 0.676698, 0.289511),
        (-0.003712, 1.511869, -0.007028),
    ),
    _ligands(
        "JSPC-10",
        "Sphenocorona (J87)",
        "C2v",
        (-1.001872, -0.08383, -0.581156),
        (-1.002035, -0.076631, 0.581869),
        (-0.516334, 0.802168, -0.005029),
        (0.028693, 0.335227, -0.920231),
        (-0.064316, -0.772041, -0.57676),
        (-0.064478, -0.76483, 0.586265),
        (0.028438, 0.346602, 0.916012),
        (0.642643, 0.705054, -0.004284),
        (0.974705, -0.24946, -0.579854),
        (0.974554, -0.242261, 0.583171),
    ),
    _ligands(
        "SDD-10",
        "Staggered dodecahedron (2:6:2)",
        "D2",
        (-0.524414, 0.908285, 0.0),
        (0.524414, 0.908285, 0.0),
        (-1.048828, 0.0, 0.0),
        (1.048828, 0.0, 0.0),
        (-0.524414, -0.908285, 0.0),
        (0.524414, -0.908285, 0.0),
        (-0.524414, 0.0, 0.908285),
        (0.524414, 0.0, 0.908285),
        (0.262207, 0.454143, -0.908285),
        (-0.262207, -0.454143, -0.908285),
    ),
    _ligands(
        "TD-10",
        "Tetradecahedron (2:6:2)",
        "C2v",
        (-0.524414, 0.908284, 0.0),
        (0.524414, 0.908284, 0.0),
        (-1.048827, 0.0, 0.0),
        (1.048827, 0.0, 0.0),
        (-0.524414, -0.908284, 0.0),
        (0.524414, -0.908284, 0.0),
        (-0.524414, 0.0, 0.908284),
        (0.524414, 0.0, 0.908284),
        (0.0, 0.524414, -0.908284),
        (0.0, -0.524414, -0.908284),
    ),
    _ligands(
        "HD-10",
        "Hexadecahedron (2:6:2)",
        "D4h",
        (-0.524414, 0.908284, 0.0),
        (0.524414, 0.908284, 0.0),
        (-1.048827, 0.0, 0.0),
        (1.048827, 0.0, 0.0),
        (-0.524414, -0.908284, 0.0),
        (0.524414, -0.908284, 0.0),
        (-0.524414, 0.0, 0.908284),
        (0.524414, 0.0, 0.908284),
        (-0.524414, 0.0, -0.908284),
        (0.524414, 0.0, -0.908284),
    ),
    # CN=11
    _ligands("HP-11", "Hendecagon", "D11h", *_regular_polygon(11)),
    _ligands(
        "DPY-11",
        "Decagonal pyramid",
        "C10v",
        (0.0, 0.0, -0.961074),
        (1.048445, 0.0, 0.08737),
        (0.84821, 0.61626, 0.08737),
        (0.323987, 0.99713, 0.08737),
        (-0.323987, 0.99713, 0.08737),
        (-0.84821, 0.61626, 0.08737),
        (-1.048445, 0.0, 0.08737),
        (-0.84821, -0.61626, 0.08737),
        (-0.323987, -0.99713, 0.08737),
        (0.323987, -0.99713, 0.08737),
        (0.84821, -0.61626, 0.08737),
    ),
    _ligands(
        "EBPY-11",
        "Enneagonal bipyramid",
        "D9h",
        (0.0, 0.0, -1.044466),
        (1.044466, 0.0, 0.0),
        (0.800107, 0.67137, 0.0),
        (0.18137, 1.028598, 0.0),
        (-0.522233, 0.904534, 0.0),
        (-0.981477, 0.357228, 0.0),
        (-0.981477, -0.357228, 0.0),
        (-0.522233, -0.904534, 0.0),
        (0.18137, -1.028598, 0.0),
        (0.800107, -0.67137, 0.0),
        (0.0, 0.0, 1.044466),
    ),
    _ligands(
        "JCPPR-11",
        "Capped pentagonal prism (J9)",
        "C5v",
        (0.900823, 0.0, 0.438971),
        (0.900823, 0.0, -0.62001),
        (0.27837, 0.856734, 0.438971),
        (0.27837, 0.856734, -0.62001),
        (-0.728781, 0.529491, 0.438971),
        (-0.728781, 0.529491, -0.62001),
        (-0.728781, -0.529491, 0.438971),
        (-0.728781, -0.529491, -0.62001),
        (0.27837, -0.856734, 0.438971),
        (0.27837, -0.856734, -0.62001),
        (0.0, 0.0, 0.995711),
    ),
    _ligands(
        "JCPAPR-11",
        "Capped pentagonal antiprism (J11)",
        "C5v",
        (0.937758, 0.0, 0.556249),
        (0.758662, 0.5512, -0.381508),
        (0.289783, 0.89186, 0.556249),
        (-0.289783, 0.89186, -0.381508),
        (-0.758662, 0.5512, 0.556249),
        (-0.937758, 0.0, -0.381508),
        (-0.758662, -0.5512, 0.556249),
        (-0.289783, -0.89186, -0.381508),
        (0.289783, -0.89186, 0.556249),
        (0.758662, -0.5512, -0.381508),
        (0.0, 0.0, -0.961074),
    ),
    _ligands(
        "JAPPR-11",
        "Augmented pentagonal prism (J52)",
        "C2v",
        (0.0, -1.305264, 0.0),
        (0.0, 0.986976, 0.510294),
        (0.825655, 0.386871, 0.510294),
        (0.510294, -0.583708, 0.510294),
        (-0.510294, -0.583708, 0.510294),
        (-0.825655, 0.386871, 0.510294),
        (0.0, 0.986976, -0.510294),
        (0.825655, 0.386871, -0.510294),
        (0.510294, -0.583708, -0.510294),
        (-0.510294, -0.583708, -0.510294),
        (-0.825655, 0.386871, -0.510294),
    ),
    _ligands(
        "JASPC-11",
        "Augmented sphenocorona (J87)",
        "Cs",
        (-0.549649, -0.001864, 0.864507),
        (0.549649, -0.001864, 0.864507),
        (0.0, 0.867614, 0.476754),
        (-0.867816, 0.476159, -0.072895),
        (-0.549649, -0.57609, -0.072895),
        (0.549649, -0.57609, -0.072895),
        (0.867816, 0.476159, -0.072895),
        (0.0, 0.867614, -0.622545),
        (-0.549649, -0.001864, -1.010297),
        (0.549649, -0.001864, -1.010297),
        (0.0, -0.951821, 0.801846),
    ),
    # CN=12
    _ligands("DP-12", "Dodecagon", "D12h", *_regular_polygon(12)),
    _ligands(
        "HPY-12",
        "Hendecagonal pyramid",
        "C11v",
        (0.0, 0.0, -0.963863),
        (1.044185, 0.0, 0.080322),
        (0.878424, 0.564529, 0.080322),
        (0.43377, 0.949824, 0.080322),
        (-0.148603, 1.033557, 0.080322),
        (-0.683796, 0.789142, 0.080322),
        (-1.001888, 0.294181, 0.080322),
        (-1.001888, -0.294181, 0.080322),
        (-0.683796, -0.789142, 0.080322),
        (-0.148603, -1.033557, 0.080322),
        (0.43377, -0.949824, 0.080322),
        (0.878424, -0.564529, 0.080322),
    ),
    _ligands(
        "DBPY-12",
        "Decagonal bipyramid",
        "D10h",
        (0.0, 0.0, -1.040833),
        (1.040833, 0.0, 0.0),
        (0.842052, 0.611786, 0.0),
        (0.321635, 0.989891, 0.0),
        (-0.321635, 0.989891, 0.0),
        (-0.842052, 0.611786, 0.0),
        (-1.040833, 0.0, 0.0),
        (-0.842052, -0.611786, 0.0),
        (-0.321635, -0.989891, 0.0),
        (0.321635, -0.989891, 0.0),
        (0.842052, -0.611786, 0.0),
        (0.0, 0.0, 1.040833),
    ),
    _ligands(
        "HPR-12",
        "Hexagonal prism",
        "D6h",
        (0.930949, 0.0, -0.465475),
        (0.465475, 0.806226, -0.465475),
        (-0.465475, 0.806226, -0.465475),
        (-0.930949, 0.0, -0.465475),
        (-0.465475, -0.806226, -0.465475),
        (0.465475, -0.806226, -0.465475),
        (0.930949, 0.0, 0.465475),
        (0.465475, 0.806226, 0.465475),
        (-0.465475, 0.806226, 0.465475),
        (-0.930949, 0.0, 0.465475),
        (-0.465475, -0.806226, 0.465475),
        (0.465475, -0.806226, 0.465475),
    ),
    _ligands(
        "HAPR-12",
        "Hexagonal antiprism",
        "D6d",
        (0.828737, 0.478472, -0.40938),
        (0.0, 0.956944, -0.40938),
        (-0.828737, 0.478472, -0.40938),
        (-0.828737, -0.478472, -0.40938),
        (0.0, -0.956944, -0.40938),
        (0.828737, -0.478472, -0.40938),
        (0.956944, 0.0, 0.40938),
        (0.478472, 0.828737, 0.40938),
        (-0.478472, 0.828737, 0.40938),
        (-0.956944, 0.0, 0.40938),
        (-0.478472, -0.828737, 0.40938),
        (0.478472, -0.828737, 0.40938),
    ),
    _ligands(
        "TT-12",
        "Truncated tetrahedron",
        "Td",
        (0.0, 0.443813, -0.941469),
        (0.443813, 0.887625, -0.313823),
        (-0.443813, 0.887625, -0.313823),
        (0.0, -0.443813, -0.941469),
        (0.443813, -0.887625, -0.313823),
        (-0.443813, -0.887625, -0.313823),
        (0.887625, 0.443813, 0.313823),
        (0.887625, -0.443813, 0.313823),
        (0.443813, 0.0, 0.941469),
        (-0.887625, 0.443813, 0.313823),
        (-0.887625, -0.443813, 0.313823),
        (-0.443813, 0.0, 0.941469),
    ),
    _ligands(
        "COC-12",
        "Cuboctahedron",
        "Oh",
        (0.520416, 0.520416, -0.73598),
        (0.520416, -0.520416, -0.73598),
        (1.040833, 0.0, 0.0),
        (-0.520416, 0.520416, -0.73598),
        (0.0, 1.040833, 0.0),
        (-0.520416, -0.520416, -0.73598),
        (-1.040833, 0.0, 0.0),
        (0.0, -1.040833, 0.0),
        (0.520416, 0.520416, 0.73598),
        (0.520416, -0.520416, 0.73598),
        (-0.520416, 0.520416, 0.73598),
        (-0.520416, -0.520416, 0.73598),
    ),
    _ligands(
        "ACOC-12",
        "Anticuboctahedron (J27)",
        "D3h",
        (0.600925, 0.0, -0.849837),
        (-0.300463, 0.520416, -0.849837),
        (-0.300463, -0.520416, -0.849837),
        (0.901388, 0.520416, 0.0),
        (0.0, 1.040833, 0.0),
        (-0.901388, 0.520416, 0.0),
        (-0.901388, -0.520416, 0.0),
        (0.0, -1.040833, 0.0),
        (0.901388, -0.520416, 0.0),
        (0.600925, 0.0, 0.849837),
        (-0.300463, 0.520416, 0.849837),
        (-0.300463, -0.520416, 0.849837),
    ),
    _ligands(
        "IC-12",
        "Icosahedron",
        "Ih",
        (0.753154, 0.547198, -0.465475),
        (-0.287679, 0.885385, -0.465475),
        (-0.930949, 0.0, -0.465475),
        (-0.287679, -0.885385, -0.465475),
        (0.753154, -0.547198, -0.465475),
        (0.930949, 0.0, 0.465475),
        (0.287679, 0.885385, 0.465475),
        (-0.753154, 0.547198, 0.465475),
        (-0.753154, -0.547198, 0.465475),
        (0.287679, -0.885385, 0.465475),
        (0.0, 0.0, -1.040833),
        (0.0, 0.0, 1.040833),
    ),
    _ligands(
        "JSC-12",
        "Square cupola (J4)",
        "C4v",
        (1.141165, 0.0, 0.190029),
        (0.806926, 0.806926, 0.190029),
        (0.0, 1.141165, 0.190029),
        (-0.806926, 0.806926, 0.190029),
        (-1.141165, 0.0, 0.190029),
        (-0.806926, -0.806926, 0.190029),
        (0.0, -1.141165, 0.190029),
        (0.806926, -0.806926, 0.190029),
        (0.570583, 0.236343, -0.427565),
        (-0.236343, 0.570583, -0.427565),
        (-0.570583, -0.236343, -0.427565),
        (0.236343, -0.570583, -0.427565),
    ),
    _ligands(
        "JEPBPY-12",
        "Elongated pentagonal bipyramid (J16)",
        "D5h",
        (0.891336, 0.0, 0.523914),
        (0.891336, 0.0, -0.523914),
        (0.275438, 0.847711, 0.523914),
        (0.275438, 0.847711, -0.523914),
        (-0.721106, 0.523914, 0.523914),
        (-0.721106, 0.523914, -0.523914),
        (-0.721106, -0.523914, 0.523914),
        (-0.721106, -0.523914, -0.523914),
        (0.275438, -0.847711, 0.523914),
        (0.275438, -0.847711, -0.523914),
        (0.0, 0.0, 1.07479),
        (0.0, 0.0, -1.07479),
    ),
    _ligands(
        "JBAPPR-12",
        "Biaugmented pentagonal prism (J53)",
        "C2v",
        (0.852576, 0.48934, -0.061742),
        (0.277323, 0.48934, 0.730026),
        (-0.653457, 0.48934, 0.427597),
        (-0.653457, 0.48934, -0.551082),
        (0.277323, 0.48934, -0.853511),
        (0.852576, -0.48934, -0.061742),
        (0.277323, -0.48934, 0.730026),
        (-0.653457, -0.48934, 0.427597),
        (-0.653457, -0.48934, -0.551082),
        (0.277323, -0.48934, -0.853511),
        (-1.345488, 0.0, -0.061742),
        (1.124814, 0.0, 0.740907),
    ),
    _ligands(
        "JSPMC-12",
        "Sphenomegacorona (J88)",
        "Cs",
        (-0.506162, -0.030252, -0.601961),
        (-0.865277, 0.700144, 0.0),
        (0.0, 0.841196, -0.506162),
        (-1.298915, -0.2146, 0.0),
        (0.506162, -0.030252, -0.601961),
        (-0.506162, -0.844158, 0.0),
        (0.0, 0.841196, 0.506162),
        (-0.506162, -0.030252, 0.601961),
        (0.865277, 0.700144, 0.0),
        (0.506162, -0.844158, 0.0),
        (0.506162, -0.030252, 0.601961),
        (1.298915, -0.2146, 0.0),
    ),
]

REFERENCE_GEOMETRIES: Dict[str, ReferenceGeometry] = {g.code: g for g in _TABLE}


def get_geometry(code: str) -> ReferenceGeometry:
    """Look up a reference geometry by its SHAPE code, e.g. ``"OC-6"``.

    Raises:
        KeyError: If no geometry has that code
    """
    try:
        return REFERENCE_GEOMETRIES[code]
    except KeyError:
        raise KeyError(
            f"Unknown reference geometry '{code}'. "
            f"Available: {', '.join(sorted(REFERENCE_GEOMETRIES))}"
        ) from None


def geometries_for(coordination_number: int) -> List[ReferenceGeometry]:
    """All reference geometries with the given coordination number, in table order."""
    return [g for g in _TABLE if g.coordination_number == coordination_number]
