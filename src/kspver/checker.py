"""
Version Checker: evaluating annotations and pruning configuration trees.

The checker binds the expression layer to a running game version and a
progress sink, and walks configuration trees depth-first:

    For each node (pre-order):
        1. values, in order: strip satisfied annotations, drop the rest
        2. child nodes, in order: strip and descend, or drop without descending

Every removal is reported with its path. A malformed annotation is
reported and then re-raised, aborting the whole pass.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from kspver.exceptions import (
    InvalidArgumentError,
    MalformedAnnotationError,
    MalformedExpressionError,
)
from kspver.interpreter import evaluate, evaluate_needs, matches
from kspver.markers import split_annotation
from kspver.patches import ProtoPatch
from kspver.progress import ConfigSource, PatchProgress
from kspver.tree import ConfigNode, NodeStack
from kspver.versioning import GameVersion


logger = logging.getLogger(__name__)


class VersionChecker:
    """
    Checks version annotations against one running game version.

    Args:
        progress: Sink receiving removals, diagnostics and failures
        game_version: Running game version, fully specified
    """

    def __init__(self, progress: PatchProgress, game_version: GameVersion):
        if progress is None:
            raise InvalidArgumentError("progress cannot be None")
        if game_version is None or not game_version.is_complete:
            raise InvalidArgumentError(f"game_version must be major.minor.revision, got {game_version}")
        self.progress = progress
        self.game_version = game_version

    def check_version(self, term: str) -> bool:
        """Check a single term such as ">≈1.8"."""
        return matches(self.game_version, term)

    def check_version_expression(self, expression: str) -> bool:
        """Check a full expression such as "1.8|1.9,!1.9.0"."""
        return evaluate(self.game_version, expression)

    def check_patch(self, patch: ProtoPatch, mods: Iterable[str] = ()) -> bool:
        """
        Check the root-level KSP_VERSION and NEEDS of a patch.

        Returns:
            False (after reporting) if either expression is unsatisfied
        """
        try:
            if patch.ksp_version is not None and not self.check_version_expression(patch.ksp_version):
                self.progress.ksp_version_unsatisfied_root(patch.source)
                return False
            if patch.needs is not None and not evaluate_needs(patch.needs, mods):
                self.progress.needs_unsatisfied_root(patch.source)
                return False
        except MalformedExpressionError as e:
            self.progress.exception(f"Malformed root expression in {patch.source}", e)
            raise
        return True

    def check_version_recursive(self, node: ConfigNode, source: ConfigSource) -> None:
        """
        Prune a tree in place.

        Args:
            node: Tree root; its own name is not checked
            source: Origin of the tree, used in reports

        Raises:
            InvalidArgumentError: If node or source is None
            MalformedAnnotationError: On the first malformed annotation
        """
        if node is None:
            raise InvalidArgumentError("node cannot be None")
        if source is None:
            raise InvalidArgumentError("source cannot be None")
        self._check_recursive(NodeStack(node), source)

    def _check_name(self, name: Optional[str]) -> Tuple[bool, Optional[str]]:
        """Return (satisfied, stripped name) for a possibly annotated name."""
        annotated = split_annotation(name)
        if not annotated.has_annotation:
            return True, name

        try:
            satisfied = self.check_version_expression(annotated.expression)
        except MalformedExpressionError as e:
            raise MalformedAnnotationError(f"Invalid KSP_VERSION expression in {name!r}: {e}") from e

        return satisfied, annotated.name

    def _check_recursive(self, stack: NodeStack, source: ConfigSource) -> None:
        node = stack.value

        # On failure, entries already decided are committed before re-raising
        kept_values = []
        decided = 0
        try:
            for value in node.values:
                try:
                    satisfied, stripped = self._check_name(value.name)
                except Exception as e:
                    self.progress.exception(f'Exception while checking KSP_VERSION for value "{value.name}"', e)
                    raise

                if satisfied:
                    if stripped != value.name:
                        logger.debug(f"Stripped KSP_VERSION from value {value.name!r}")
                    value.name = stripped
                    kept_values.append(value)
                else:
                    logger.debug(f"Removing value {value.name!r} under {stack.get_path()}")
                    self.progress.ksp_version_unsatisfied_value(source, f"{stack.get_path()}/{value.name}")
                decided += 1
        finally:
            node.values[:] = kept_values + node.values[decided:]

        kept_nodes = []
        decided = 0
        try:
            for child in node.nodes:
                if child.name is None:
                    self.progress.error(
                        source,
                        f"Error - Node in file {source} subnode: {stack.get_path()} has config.name == None",
                    )

                try:
                    satisfied, stripped = self._check_name(child.name)
                except Exception as e:
                    self.progress.exception(f'Exception while checking KSP_VERSION for node "{child.name}"', e)
                    raise

                decided += 1
                if satisfied:
                    if stripped != child.name:
                        logger.debug(f"Stripped KSP_VERSION from node {child.name!r}")
                    child.name = stripped
                    kept_nodes.append(child)
                    self._check_recursive(stack.push(child), source)
                else:
                    logger.debug(f"Removing node {child.name!r} under {stack.get_path()}")
                    self.progress.ksp_version_unsatisfied_node(source, f"{stack.get_path()}/{child.name}")
        finally:
            node.nodes[:] = kept_nodes + node.nodes[decided:]
