"""
Filfox result codes

Filfox answers every verification request with a numeric errorCode. This module
turns that code into a VerificationOutcome and logs it for the user.
"""
import logging
from typing import Any, Dict, Optional

from web3 import Web3

from .config import NetworkConfig
from .models import VerificationOutcome

logger = logging.getLogger(__name__)

VERIFIED = 0
NO_SOURCE_FILE = 1
INIT_CODE_NOT_FOUND = 2
COMPILER_VERSION_INCORRECT = 3
BYTECODE_MISMATCH = 4
UNSUPPORTED_LANGUAGE = 5
ALREADY_VERIFIED = 6
COMPILATION_ERROR = 7
# Never sent by Filfox; we report it when no response was obtained
TRANSPORT_ERROR = 8

SUCCESS_CODES = (VERIFIED, ALREADY_VERIFIED)

RESULT_MESSAGES = {
    VERIFIED: "Contract verified successfully",
    NO_SOURCE_FILE: "No source file was provided",
    INIT_CODE_NOT_FOUND: "Contract initCode not found",
    COMPILER_VERSION_INCORRECT: "Compiler version format incorrect",
    BYTECODE_MISMATCH: "Verification failed - bytecode mismatch",
    UNSUPPORTED_LANGUAGE: "Unsupported language (Solidity only)",
    ALREADY_VERIFIED: "Contract already verified",
    COMPILATION_ERROR: "Compilation error in source files",
    TRANSPORT_ERROR: "Could not reach Filfox",
}

RESULT_HINTS = {
    COMPILER_VERSION_INCORRECT: ["Use the long format (e.g., v0.7.6+commit.7338295f)"],
    BYTECODE_MISMATCH: ["Check source files and compiler settings"],
}

UNKNOWN_MESSAGE = "Unknown verification error occurred"


def explorer_link(network: NetworkConfig, address: str) -> str:
    if Web3.is_address(address):
        address = Web3.to_checksum_address(address)
    return f"{network.explorer_url}{address}"


def interpret_result(result: Dict[str, Any], network: Optional[NetworkConfig] = None,
                     address: Optional[str] = None) -> VerificationOutcome:
    """Map a Filfox response body onto a VerificationOutcome"""
    try:
        error_code = int(result.get("errorCode"))
    except (TypeError, ValueError):
        error_code = -1

    outcome = VerificationOutcome(
        error_code=error_code,
        success=error_code in SUCCESS_CODES,
        message=RESULT_MESSAGES.get(error_code, UNKNOWN_MESSAGE),
        hints=list(RESULT_HINTS.get(error_code, [])),
        contract_name=result.get("contractName"),
        error_msg=result.get("errorMsg"),
    )

    if outcome.success and network is not None and address:
        outcome.explorer_url = explorer_link(network, address)

    return outcome


def transport_failure(error: Exception) -> VerificationOutcome:
    return VerificationOutcome(
        error_code=TRANSPORT_ERROR,
        success=False,
        message=RESULT_MESSAGES[TRANSPORT_ERROR],
        error_msg=str(error),
    )


def log_outcome(outcome: VerificationOutcome) -> None:
    """Write the outcome to the log the way a user wants to read it"""
    if outcome.error_code == VERIFIED:
        logger.info(f"✅ Contract \"{outcome.contract_name}\" verified successfully!")
        if outcome.explorer_url:
            logger.info(f"🔗 View at: {outcome.explorer_url}")
        return

    if outcome.error_code == ALREADY_VERIFIED:
        logger.info(f"ℹ️ Contract already verified at: {outcome.explorer_url or 'Filfox'}")
        return

    logger.error(f"⚠️ Error: {outcome.message}.")
    for hint in outcome.hints:
        logger.error(f"💡 {hint}")
    if outcome.error_msg:
        logger.error(f"📝 Details: {outcome.error_msg}")
