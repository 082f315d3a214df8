import re
from typing import List

# Lexical only: an import-looking string inside a comment is still picked up.
IMPORT_PATTERNS = [
    re.compile(r"""import\s+["']([^"']+)["']"""),                          # import "path"
    re.compile(r"""import\s*\{[^}]*\}\s*from\s+["']([^"']+)["']"""),        # import {A, B} from "path"
    re.compile(r"""import\s+\*\s+as\s+\w+\s+from\s+["']([^"']+)["']"""),    # import * as A from "path"
    re.compile(r"""import\s+\w+\s+from\s+["']([^"']+)["']"""),              # import A from "path"
]


def extract_imports(content: str) -> List[str]:
    """Return the distinct import paths referenced by a Solidity source"""
    matches = []
    for pattern in IMPORT_PATTERNS:
        for match in pattern.finditer(content):
            matches.append((match.start(), match.group(1)))

    imports = []
    for _, import_path in sorted(matches):
        if import_path not in imports:
            imports.append(import_path)
    return imports
