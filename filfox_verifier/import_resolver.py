"""
Import Path Resolver

Maps one import string, as written in a Solidity file, onto a key of the
available source map. Strategies are tried in the order solc users expect:
exact key, relative path, remapping, and finally a filename search.
"""
import logging
import posixpath
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .models import SourceFile
from .remappings import RemappingRule, longest_matching_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedImport:
    path: str
    source: SourceFile


def resolve_relative_import(import_path: str, current_file: str) -> str:
    """Resolve ./ and ../ imports against the importing file's directory"""
    current_dir = posixpath.dirname(current_file)
    return posixpath.normpath(posixpath.join(current_dir, import_path))


def resolve_remapped_import(import_path: str, remappings: List[RemappingRule]) -> Optional[str]:
    rule = longest_matching_rule(import_path, remappings)
    if rule is None:
        return None
    return rule.resolved + import_path[len(rule.original):]


def _path_segments(path: str) -> List[str]:
    return [s for s in path.split("/") if s and s not in (".", "..")]


def path_context_matches(import_path: str, available_path: str) -> bool:
    """True when at most one segment of the import is missing from the candidate"""
    import_segments = _path_segments(import_path)
    available_segments = _path_segments(available_path)

    matches = sum(1 for segment in import_segments if segment in available_segments)
    return matches >= max(1, len(import_segments) - 1)


def filename_candidates(import_path: str, available_files: Mapping[str, SourceFile]) -> List[str]:
    """
    Last-resort lookup by base filename.

    Returns every available path with the same filename whose directory context
    roughly agrees with the import, in the map's iteration order. Callers take
    the first one; when several match the choice is best-effort.
    """
    file_name = posixpath.basename(import_path)
    return [
        file_path for file_path in available_files
        if posixpath.basename(file_path) == file_name and path_context_matches(import_path, file_path)
    ]


def resolve_import_path(import_path: str,
                        current_file: str,
                        remappings: List[RemappingRule],
                        available_files: Mapping[str, SourceFile]) -> Optional[ResolvedImport]:
    """Resolve an import to an available file, or None with a warning logged"""
    # 1. exact key
    if import_path in available_files:
        return ResolvedImport(import_path, available_files[import_path])

    # 2. relative to the importing file
    if import_path.startswith("./") or import_path.startswith("../"):
        resolved_path = resolve_relative_import(import_path, current_file)
        if resolved_path in available_files:
            return ResolvedImport(resolved_path, available_files[resolved_path])

    # 3. remapped
    remapped_path = resolve_remapped_import(import_path, remappings)
    if remapped_path and remapped_path in available_files:
        return ResolvedImport(remapped_path, available_files[remapped_path])

    # 4. filename search
    candidates = filename_candidates(import_path, available_files)
    if candidates:
        if len(candidates) > 1:
            logger.debug(f"🔍 {import_path} matched {len(candidates)} files by name, using {candidates[0]}")
        return ResolvedImport(candidates[0], available_files[candidates[0]])

    logger.warning(f"⚠️ Could not resolve import: {import_path} from {current_file}")
    return None
