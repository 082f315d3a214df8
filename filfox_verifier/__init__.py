from .closure_builder import build_closure, collect_necessary_files
from .config import FILFOX_NETWORKS, NetworkConfig, get_network_config
from .exceptions import ConfigError
from .import_extractor import extract_imports
from .import_resolver import ResolvedImport, resolve_import_path
from .models import SourceFile, VerificationOutcome, VerificationRequest
from .remappings import RemappingRule, parse_remappings
from .verifier_service import FilfoxVerifier, normalize_compiler_version


def verify_contract(chain_id, request: VerificationRequest) -> VerificationOutcome:
    """Verify a contract on Filfox in one call"""
    return FilfoxVerifier(chain_id).verify(request)


__all__ = [
    'FilfoxVerifier',
    'verify_contract',
    'build_closure',
    'collect_necessary_files',
    'extract_imports',
    'resolve_import_path',
    'ResolvedImport',
    'parse_remappings',
    'RemappingRule',
    'normalize_compiler_version',
    'get_network_config',
    'FILFOX_NETWORKS',
    'NetworkConfig',
    'SourceFile',
    'VerificationRequest',
    'VerificationOutcome',
    'ConfigError',
]
