from ..exceptions import BadResponse
from ..schemas.kinds import ReportKind, RequestKind
from ..transport.interface import Requester

YES_NO = ["yes", "no"]


def ask_yes_no(transport: Requester, question: str) -> bool:
    """
    Asks a yes/no control question until it gets a recognisable answer, or
    fails with BadResponse if the transport cannot supply another one.
    """
    while True:
        answer = transport.request(RequestKind.QUESTION, question, YES_NO)
        normalized = answer.lower()
        if normalized in ("y", "yes"):
            return True
        if normalized in ("n", "no"):
            return False
        transport.report(ReportKind.BAD_RESPONSE, "Must answer yes or no")
        if not transport.is_interactive():
            raise BadResponse(f"Expected yes or no, got '{answer}'")
