"""
SpaceRemit payment status reconciliation.

SpaceRemit classifies every payment with a one-letter ``status_tag``. This
module is the single place that decides which tags count as a paid order.
"""

from pydantic import BaseModel, ConfigDict

STATUS_DESCRIPTIONS = {
    "A": "Completed - Payment completed and amount transferred to the seller",
    "B": "Pending - Payment received and pending until the delivery is confirmed",
    "C": "Refused - Payment refused. Transaction did not go through",
    "D": "Waiting holding time - Payment received and held until the holding time ends",
    "E": "Needs review - Payment is being reviewed before it is released",
    "F": "Not paid - Deposit only, the buyer has not completed the payment",
    "G": "Canceled - Payment canceled",
    "H": "Refunded - Payment refunded to the buyer",
    "T": "Test - Test payment, no real funds were moved",
}

ACCEPTED_TAGS = frozenset({"A", "B", "D", "E"})
TEST_TAG = "T"


class Verdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    accepted: bool
    description: str


def classify(status_tag: str, accept_test: bool = False) -> Verdict:
    """
    Map a SpaceRemit status tag to an accept/reject verdict.

    Args:
        status_tag: One-letter code from the gateway. Any string is accepted;
            tags outside the known table are reported as unknown.
        accept_test: Also accept ``T`` (test payments). Sandbox only.

    Returns:
        Verdict with ``accepted`` and a human-readable ``description``.
    """
    description = STATUS_DESCRIPTIONS.get(status_tag)
    if description is None:
        return Verdict(accepted=False, description=f"Unknown status: {status_tag}")
    accepted = status_tag in ACCEPTED_TAGS or (accept_test and status_tag == TEST_TAG)
    return Verdict(accepted=accepted, description=description)
