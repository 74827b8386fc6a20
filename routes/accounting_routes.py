"""
회계 라우트

- /addPayment: 회계 장부(明細 시트)에 결제 기록 추가 (callable, 인증 필요)
"""

from flask import Blueprint, current_app

from utils.accounting import append_payment
from utils.callable import callable_function
from utils.services import get_services
from utils.validators import validate_payment_input

bp = Blueprint('accounting', __name__)


@bp.route('/addPayment', methods=['POST'])
@callable_function('addPayment')
def add_payment(data, caller):
    """
    결제 기록 추가 API

    data:
    - paid: 정산 여부 (bool)
    - paidDate: "2024/04/01" (필수)
    - type: "試合" | "練習" | "その他" (필수)
    - description: 내용 (필수)
    - participationFeeIncome / fromVsTeamIncome / otherIncome: 수입
    - groundFeeExpenses / umpireFeeExpenses / otherExpenses: 지출
    - remarks: 비고
    - paidMemberName: 대신 지불한 사람

    Returns:
        {"updatedRange": "明細!A5:S5", "rowNumber": 5} 또는 None (시트가 비어 있음)
    """
    record = validate_payment_input(data)

    result = append_payment(
        get_services().sheets,
        record,
        sheet_name=current_app.config['ACCOUNTING_SHEET_NAME'],
        end_cell=current_app.config['ACCOUNTING_RANGE_END_CELL']
    )

    if result:
        current_app.logger.info(
            f"결제 기록 추가 완료: User={caller.uid}, Row={result['rowNumber']}"
        )
    return result
