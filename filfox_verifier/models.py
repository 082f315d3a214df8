"""
Verification data models

Plain containers passed between the project collaborator (whoever compiled the
contract) and the verifier. Nothing here talks to the network.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class SourceFile:
    """A Solidity source file keyed by its repository-relative path"""
    path: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"content": self.content}


def source_files_from_dict(raw: Mapping[str, Any]) -> Dict[str, SourceFile]:
    """Build a path -> SourceFile map from {path: {"content": ...}} or {path: "..."}"""
    files = {}
    for path, value in raw.items():
        if isinstance(value, SourceFile):
            files[path] = value
        elif isinstance(value, str):
            files[path] = SourceFile(path, value)
        else:
            files[path] = SourceFile(path, value["content"])
    return files


def source_files_to_dict(files: Mapping[str, SourceFile]) -> Dict[str, Dict[str, str]]:
    return {path: source.to_dict() for path, source in files.items()}


@dataclass
class VerificationRequest:
    """Everything Filfox needs to recompile and match a deployed contract"""
    address: str
    compiler: str
    source_files: Dict[str, SourceFile]
    metadata: Dict[str, Any]
    language: str = "Solidity"
    optimize: bool = False
    optimize_runs: int = 200
    evm_version: str = ""
    via_ir: bool = False
    libraries: str = ""
    optimizer_details: str = "{}"
    license: str = ""

    @property
    def remappings(self) -> List[str]:
        """Raw remapping strings from metadata.settings.remappings"""
        settings = (self.metadata or {}).get("settings") or {}
        return list(settings.get("remappings") or [])

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VerificationRequest":
        """Build a request from the camelCase shape used on the wire"""
        return cls(
            address=data["address"],
            compiler=data["compiler"],
            source_files=source_files_from_dict(data.get("sourceFiles") or {}),
            metadata=data.get("metadata") or {},
            language=data.get("language", "Solidity"),
            optimize=bool(data.get("optimize", False)),
            optimize_runs=int(data.get("optimizeRuns", 200)),
            evm_version=data.get("evmVersion", ""),
            via_ir=bool(data.get("viaIR", False)),
            libraries=data.get("libraries", ""),
            optimizer_details=data.get("optimizerDetails", "{}"),
            license=data.get("license", ""),
        )


@dataclass
class VerificationOutcome:
    """Interpreted Filfox response"""
    error_code: int
    success: bool
    message: str
    hints: List[str] = field(default_factory=list)
    contract_name: Optional[str] = None
    error_msg: Optional[str] = None
    explorer_url: Optional[str] = None
