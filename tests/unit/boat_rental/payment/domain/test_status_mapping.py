import pytest

from boat_rental.payment.domain import GatewayOutcome, PaymentStatus, map_gateway_status


class TestMapGatewayStatus:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (1, PaymentStatus.PENDING),
            (2, PaymentStatus.PENDING),
            (3, PaymentStatus.CONFIRMED),
            (4, PaymentStatus.CONFIRMED),
            (5, PaymentStatus.PENDING),
            (6, PaymentStatus.CANCELLED),
            (7, PaymentStatus.CANCELLED),
            (8, PaymentStatus.CANCELLED),
            (9, PaymentStatus.PENDING),
        ],
    )
    def test_known_codes(self, code, expected):
        assert map_gateway_status(code) == expected

    @pytest.mark.parametrize("code", [0, 10, -1, None, "abc"])
    def test_unrecognized_codes_are_unknown(self, code):
        assert map_gateway_status(code) == PaymentStatus.UNKNOWN

    def test_numeric_strings_are_accepted(self):
        assert map_gateway_status("3") == PaymentStatus.CONFIRMED

    def test_simulator_outcomes_map_to_expected_status(self):
        assert map_gateway_status(GatewayOutcome.APPROVED.status_code) == (
            PaymentStatus.CONFIRMED
        )
        assert map_gateway_status(GatewayOutcome.DECLINED.status_code) == (
            PaymentStatus.CANCELLED
        )
        assert map_gateway_status(GatewayOutcome.PENDING.status_code) == (
            PaymentStatus.PENDING
        )
