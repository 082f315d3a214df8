"""
Import closure

Filfox rejects bundles that carry files the contract never uses, so instead of
uploading every file the compiler saw we walk the import graph from the entry
files and keep only what is reachable.
"""
import logging
from collections import deque
from typing import Dict, Iterable, List, Mapping, Optional

from .import_extractor import extract_imports
from .import_resolver import resolve_import_path
from .models import SourceFile
from .remappings import RemappingRule, alias_for_path, parse_remappings, remap_source_files

logger = logging.getLogger(__name__)


def merge_available_files(source_files: Mapping[str, SourceFile],
                          remapped_files: Mapping[str, SourceFile]) -> Dict[str, SourceFile]:
    """Single lookup table; remapped aliases shadow originals on the same key"""
    available = dict(source_files)
    available.update(remapped_files)
    return available


def seed_paths(source_files: Mapping[str, SourceFile],
               remapped_files: Mapping[str, SourceFile],
               remappings: List[RemappingRule]) -> List[str]:
    """Remapped aliases first, then originals that have no alias"""
    seeds = list(remapped_files)
    for original_path in source_files:
        alias = alias_for_path(original_path, remappings)
        if alias is None or alias not in remapped_files:
            seeds.append(original_path)
    return seeds


def build_closure(source_files: Mapping[str, SourceFile],
                  remappings: List[RemappingRule]) -> Dict[str, SourceFile]:
    """Breadth-first walk of the import graph returning only the files it reaches"""
    remapped_files = remap_source_files(source_files, remappings)
    available = merge_available_files(source_files, remapped_files)

    queue = deque(seed_paths(source_files, remapped_files, remappings))

    necessary: Dict[str, SourceFile] = {}
    processed = set()
    unresolved = 0

    while queue:
        current_file = queue.popleft()
        if current_file in processed:
            continue
        processed.add(current_file)

        source = available.get(current_file)
        if source is None:
            continue
        necessary[current_file] = source

        for import_path in extract_imports(source.content):
            resolved = resolve_import_path(import_path, current_file, remappings, available)
            if resolved is None:
                unresolved += 1
            elif resolved.path not in processed:
                queue.append(resolved.path)

    logger.info(f"✅ Resolved {len(necessary)} necessary files out of {len(available)} available")
    if unresolved:
        logger.warning(f"⚠️ {unresolved} imports could not be resolved, Filfox may reject the bundle")
    return necessary


def collect_necessary_files(source_files: Mapping[str, SourceFile],
                            raw_remappings: Optional[Iterable[str]] = None) -> Dict[str, SourceFile]:
    """Parse "original=resolved" strings and build the closure"""
    return build_closure(source_files, parse_remappings(raw_remappings))
