"""
Demo: Prune the example part for two game versions and print the results.
"""

import logging

from kspver.checker import VersionChecker
from kspver.examples import build_example_part
from kspver.progress import ConfigSource, LoggingPatchProgress
from kspver.serialization import tree_to_yaml
from kspver.versioning import GameVersion


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    print("=" * 70)
    print("ORIGINAL PART")
    print("=" * 70)
    print(tree_to_yaml(build_example_part()))

    for version in (GameVersion(1, 1, 0), GameVersion(1, 8, 1)):
        part = build_example_part()
        progress = LoggingPatchProgress()
        checker = VersionChecker(progress, version)
        checker.check_version_recursive(part, ConfigSource("GameData/Example/Parts/tank.cfg"))

        print("=" * 70)
        print(f"PRUNED FOR {version}")
        print("=" * 70)
        print(tree_to_yaml(part))
        print(f"  {progress.counter.summary()}")
        print()


if __name__ == "__main__":
    main()
