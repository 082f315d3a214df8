"""
Filfox Verification Service

Submits a contract's minimal source bundle to the Filfox verifyContract API
for Filecoin mainnet or the Calibration testnet.
"""
import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .closure_builder import collect_necessary_files
from .config import FILFOX_NETWORKS, FILFOX_TIMEOUT, NetworkConfig, get_network_config
from .models import VerificationOutcome, VerificationRequest, source_files_to_dict
from .results import interpret_result, transport_failure

logger = logging.getLogger(__name__)


def normalize_compiler_version(compiler: str) -> str:
    """Make sure the version carries exactly one leading 'v'"""
    return "v" + compiler.strip().lstrip("vV")


class FilfoxVerifier:
    """Filfox verifier that uploads only the files a contract actually imports"""

    def __init__(self, chain_id, networks: Mapping[int, NetworkConfig] = FILFOX_NETWORKS,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = FILFOX_TIMEOUT):
        self.network = get_network_config(chain_id, networks)
        self.chain_id = self.network.chain_id
        self.base_url = self.network.verify_url
        self.session = session or requests.Session()
        self.timeout = timeout

        logger.debug(f"🔍 Filfox verifier ready for {self.network.name} ({self.base_url})")

    def build_payload(self, request: VerificationRequest) -> Dict[str, Any]:
        """Build the JSON body, swapping the full file set for the import closure"""
        necessary_files = collect_necessary_files(request.source_files, request.remappings)

        return {
            "address": request.address,
            "language": request.language,
            "compiler": normalize_compiler_version(request.compiler),
            "optimize": request.optimize,
            "optimizeRuns": request.optimize_runs,
            "sourceFiles": source_files_to_dict(necessary_files),
            "license": request.license,
            "evmVersion": request.evm_version,
            "viaIR": request.via_ir,
            "libraries": request.libraries,
            # Filfox recomputes metadata server side
            "metadata": "",
            "optimizerDetails": request.optimizer_details,
        }

    def verify(self, request: VerificationRequest) -> VerificationOutcome:
        """Submit the request once and interpret Filfox's answer"""
        payload = self.build_payload(request)

        logger.info(f"🔍 Verifying {request.address} on {self.network.name} "
                    f"with {len(payload['sourceFiles'])} source files")

        try:
            response = self.session.post(
                self.base_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            result = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"❌ Filfox verification failed: {e}")
            return transport_failure(e)

        if not isinstance(result, dict):
            logger.error(f"❌ Unexpected Filfox response: {result!r}")
            return transport_failure(ValueError(f"Unexpected response body: {result!r}"))

        logger.debug(f"Filfox response (HTTP {response.status_code}): {result}")
        return interpret_result(result, self.network, request.address)
