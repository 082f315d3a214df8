"""
Solidity remapping rules

A remapping like "@openzeppelin/=lib/openzeppelin-contracts/" tells solc that
imports starting with the left side live under the right side on disk.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from .exceptions import ConfigError
from .models import SourceFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemappingRule:
    original: str
    resolved: str

    def __str__(self) -> str:
        return f"{self.original}={self.resolved}"


def parse_remapping(rule: str) -> RemappingRule:
    """Parse a single "original=resolved" string"""
    if "=" not in rule:
        raise ConfigError(f"Invalid remapping (missing '='): {rule!r}")

    original, resolved = rule.split("=", 1)
    original, resolved = original.strip(), resolved.strip()
    if not original or not resolved:
        raise ConfigError(f"Invalid remapping (empty side): {rule!r}")

    return RemappingRule(original, resolved)


def parse_remappings(rules: Optional[Iterable[str]]) -> List[RemappingRule]:
    """Parse remapping strings, keeping their declared order"""
    return [parse_remapping(rule) for rule in (rules or [])]


def longest_matching_rule(import_path: str, remappings: List[RemappingRule]) -> Optional[RemappingRule]:
    """Pick the rule with the longest original prefix; first declared wins ties"""
    best = None
    for rule in remappings:
        if import_path.startswith(rule.original):
            if best is None or len(rule.original) > len(best.original):
                best = rule
    return best


def alias_for_path(file_path: str, remappings: List[RemappingRule]) -> Optional[str]:
    """Rewrite an on-disk path back into its remapped import form"""
    for rule in remappings:
        if file_path.startswith(rule.resolved):
            return rule.original + file_path[len(rule.resolved):]
    return None


def remap_source_files(source_files: Mapping[str, SourceFile],
                       remappings: List[RemappingRule]) -> Dict[str, SourceFile]:
    """Build the alias map: remapped path -> the original file"""
    remapped = {}
    for file_path, source in source_files.items():
        alias = alias_for_path(file_path, remappings)
        if alias is not None:
            remapped[alias] = source

    if remapped:
        logger.debug(f"🔍 {len(remapped)} of {len(source_files)} source files have remapped aliases")
    return remapped
