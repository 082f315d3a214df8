"""
Filfox verification command line

Reads a VerificationRequest saved as JSON (the same camelCase shape Filfox
accepts) and submits it.

    python -m filfox_verifier request.json --chain 314159
"""
import argparse
import json
import logging
import sys

from .config import DEFAULT_CHAIN_ID, FILFOX_NETWORKS
from .exceptions import ConfigError
from .models import VerificationRequest
from .results import log_outcome
from .verifier_service import FilfoxVerifier

logger = logging.getLogger(__name__)


def load_request(path: str) -> VerificationRequest:
    """Load the request JSON from disk"""
    with open(path, 'r', encoding='utf-8') as f:
        return VerificationRequest.from_dict(json.load(f))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Verify a smart contract on Filfox")
    parser.add_argument("request", help="Path to the verification request JSON")
    parser.add_argument("--chain", default=DEFAULT_CHAIN_ID,
                        help="Chain ID (314: Filecoin Mainnet, 314159: Filecoin Calibration Testnet)")
    parser.add_argument("--verbose", action="store_true", help="Log resolver details")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    try:
        verifier = FilfoxVerifier(args.chain)
    except ConfigError:
        logger.error(f"❌ Invalid chain ID: {args.chain}")
        logger.error("Valid options:")
        for network in FILFOX_NETWORKS.values():
            logger.error(f"  {network.chain_id:<6} - {network.name}")
        return 1

    request = load_request(args.request)
    outcome = verifier.verify(request)
    log_outcome(outcome)
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())
