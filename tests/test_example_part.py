"""
Test pruning the example part definition for different game versions.
"""

from kspver.checker import VersionChecker
from kspver.examples import build_example_part
from kspver.progress import ConfigSource, LoggingPatchProgress
from kspver.versioning import GameVersion


SOURCE = ConfigSource("GameData/Example/Parts/tank.cfg")


def _prune(version):
    part = build_example_part()
    progress = LoggingPatchProgress()
    VersionChecker(progress, version).check_version_recursive(part, SOURCE)
    return part, progress.counter


def test_example_part_on_181():
    part, counter = _prune(GameVersion(1, 8, 1))

    assert [v.name for v in part.values] == ["name", "mass", "bulkheadProfiles"]
    assert [n.name for n in part.nodes] == ["MODULE", "MODULE", "RESOURCE"]

    engine, variants, resource = part.nodes
    assert engine.get_value("EngineType") == "LiquidFuel"
    assert variants.get_value("name") == "ModulePartVariants"
    assert resource.get_value("maxAmount") == "90"
    assert counter.ksp_version_unsatisfied == 2


def test_example_part_on_110():
    part, counter = _prune(GameVersion(1, 1, 0))

    assert [v.name for v in part.values] == ["name", "mass", "tags"]
    engine, variants, resource = part.nodes
    assert engine.get_value("EngineType") is None
    assert variants.get_value("name") == "ModulePartVariantsLegacy"
    assert [v.name for v in resource.values] == ["name", "amount"]
    assert counter.ksp_version_unsatisfied == 4
