"""
Unit Tests for Filfox result code interpretation
"""
import logging

import pytest

from filfox_verifier.config import get_network_config
from filfox_verifier.results import (
    TRANSPORT_ERROR,
    UNKNOWN_MESSAGE,
    interpret_result,
    log_outcome,
    transport_failure,
)


class TestInterpretResult:

    def test_verified_surfaces_contract_name_and_link(self, contract_address):
        network = get_network_config(314)

        outcome = interpret_result({"errorCode": 0, "contractName": "Token"}, network, contract_address)

        assert outcome.success
        assert outcome.contract_name == "Token"
        assert outcome.explorer_url.lower() == f"https://filfox.info/en/address/{contract_address}"

    def test_already_verified_counts_as_success(self, contract_address):
        outcome = interpret_result({"errorCode": 6}, get_network_config(314159), contract_address)

        assert outcome.success
        assert outcome.explorer_url.startswith("https://calibration.filfox.info/en/address/")

    @pytest.mark.parametrize("code", [1, 2, 3, 4, 5, 7])
    def test_server_failures(self, code):
        outcome = interpret_result({"errorCode": code})

        assert not outcome.success
        assert outcome.error_code == code
        assert outcome.message != UNKNOWN_MESSAGE

    def test_compiler_version_failure_has_hint(self):
        outcome = interpret_result({"errorCode": 3})

        assert "v0.7.6+commit.7338295f" in outcome.hints[0]

    def test_compilation_error_keeps_server_message(self):
        outcome = interpret_result({"errorCode": 7, "errorMsg": "ParserError: expected ';'"})

        assert outcome.error_msg == "ParserError: expected ';'"

    @pytest.mark.parametrize("body", [{"errorCode": 42}, {}, {"errorCode": "nope"}])
    def test_unrecognised_code_is_generic_failure(self, body):
        outcome = interpret_result(body)

        assert not outcome.success
        assert outcome.message == UNKNOWN_MESSAGE

    def test_transport_failure_uses_synthetic_code(self):
        outcome = transport_failure(ConnectionError("refused"))

        assert outcome.error_code == TRANSPORT_ERROR == 8
        assert not outcome.success
        assert "refused" in outcome.error_msg


class TestLogOutcome:

    def test_success_logs_info(self, caplog):
        with caplog.at_level(logging.INFO):
            log_outcome(interpret_result({"errorCode": 0, "contractName": "Token"}))

        assert 'Contract "Token" verified successfully' in caplog.text

    def test_failure_logs_hint_and_details(self, caplog):
        with caplog.at_level(logging.ERROR):
            log_outcome(interpret_result({"errorCode": 7, "errorMsg": "boom"}))

        assert "Compilation error" in caplog.text
        assert "boom" in caplog.text
