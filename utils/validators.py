"""
요청 데이터 검증 로직

callable 요청의 data를 검증하고 모델로 변환합니다.
검증 실패 시 InvalidArgument를 발생시키며, 원인이 된 입력값을 details에 담습니다.
"""

from models import PaymentRecord
from utils.errors import InvalidArgument


REQUIRED_PAYMENT_FIELDS = ('paidDate', 'type', 'description')

NUMBER_FIELDS = (
    'participationFeeIncome',
    'fromVsTeamIncome',
    'otherIncome',
    'groundFeeExpenses',
    'umpireFeeExpenses',
    'otherExpenses',
)


# 기존 클라이언트가 보내는 철자
FIELD_ALIASES = {
    'umpireFeeExpenses': 'umpirFeeExpenses',
    'paidMemberName': 'paidMenberName',
}


def _get(data, field):
    value = data.get(field)
    if value is None and field in FIELD_ALIASES:
        value = data.get(FIELD_ALIASES[field])
    return value


def _to_number(value, field):
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise InvalidArgument('数値を入力してください。', details={field: value})
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument('数値を入力してください。', details={field: value})
    return int(number) if number.is_integer() else number


def _to_bool(value, field):
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidArgument('真偽値を指定してください。', details={field: value})
    return value


def validate_payment_input(data):
    """
    addPayment 요청 검증

    Args:
        data (dict): callable 요청의 data

    Returns:
        PaymentRecord: 검증된 결제 기록

    Raises:
        InvalidArgument: paidDate / type / description 중 하나라도 비어 있거나,
            금액이 숫자가 아니거나 paid가 불리언이 아닌 경우

    Example:
        >>> validate_payment_input({"paidDate": "2024/04/01", "type": "練習", "description": "グラウンド代"})
        <models.PaymentRecord object ...>
    """
    if not isinstance(data, dict):
        raise InvalidArgument('必須項目が入力されていません。', details=data)

    missing = [field for field in REQUIRED_PAYMENT_FIELDS if not data.get(field)]
    if missing:
        raise InvalidArgument('必須項目が入力されていません。', details=data)

    numbers = {field: _to_number(_get(data, field), field) for field in NUMBER_FIELDS}

    return PaymentRecord(
        paid=_to_bool(data.get('paid'), 'paid'),
        paid_date=data['paidDate'],
        type=data['type'],
        description=data['description'],
        participation_fee_income=numbers['participationFeeIncome'],
        from_vs_team_income=numbers['fromVsTeamIncome'],
        other_income=numbers['otherIncome'],
        ground_fee_expenses=numbers['groundFeeExpenses'],
        umpire_fee_expenses=numbers['umpireFeeExpenses'],
        other_expenses=numbers['otherExpenses'],
        remarks=data.get('remarks') or '',
        paid_member_name=_get(data, 'paidMemberName') or ''
    )


def require_schedule_id(data):
    """
    scheduleId 필수 확인

    Raises:
        InvalidArgument: scheduleId가 없는 경우
    """
    schedule_id = (data or {}).get('scheduleId')
    if not schedule_id:
        raise InvalidArgument('scheduleIdが指定されていません。', details=data)
    return schedule_id
