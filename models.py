"""
데이터 모델

스프레드시트 행, Firestore 문서, 호출자 정보를
다루기 위한 모델입니다. 스케줄 문서의 스키마는 별도 앱이 소유하며
여기서는 읽기 전용으로만 사용합니다.
"""


class PaymentColumn:
    """
    회계 스프레드시트(明細)의 열 번호 (0부터 시작)

    TOTAL_INCOME / TOTAL_EXPENSES / BALANCE / REMAINING_BALANCE 열은
    시트의 수식 열이므로 절대 쓰지 않습니다.
    """
    PAID = 0                        # 精算
    PAID_DATE = 1                   # 日付
    TYPE = 2                        # タイプ
    DESCRIPTION = 3                 # 内容
    PARTICIPATION_FEE_INCOME = 4    # 参加費
    FROM_VS_TEAM_INCOME = 5         # 相手チームから
    OTHER_INCOME = 6                # その他収入
    TOTAL_INCOME = 7                # 収入計 (수식)
    GROUND_FEE_EXPENSES = 8         # 場代
    UMPIRE_FEE_EXPENSES = 9         # 審判代
    OTHER_EXPENSES = 10             # その他支出
    TOTAL_EXPENSES = 11             # 支出計 (수식)
    BALANCE = 12                    # 収支 (수식)
    REMAINING_BALANCE = 13          # 残高 (수식)
    REMARKS = 14                    # 備考
    PAID_MEMBER = 15                # 建て替えた人
    LAST_COLUMN = 15

    FORMULA_COLUMNS = (TOTAL_INCOME, TOTAL_EXPENSES, BALANCE, REMAINING_BALANCE)


class PaymentRecord:
    """
    회계 장부 한 행

    Attributes:
        paid (bool): 정산 완료 여부
        paid_date (str): 날짜 (YYYY/MM/DD)
        type (str): 유형 (試合 | 練習 | その他)
        description (str): 내용
        participation_fee_income (float): 참가비 수입
        from_vs_team_income (float): 상대 팀으로부터의 수입
        other_income (float): 기타 수입
        ground_fee_expenses (float): 구장 사용료
        umpire_fee_expenses (float): 심판 비용
        other_expenses (float): 기타 지출
        remarks (str): 비고
        paid_member_name (str): 대신 지불한 사람
    """
    def __init__(self, paid, paid_date, type, description,
                 participation_fee_income=0, from_vs_team_income=0, other_income=0,
                 ground_fee_expenses=0, umpire_fee_expenses=0, other_expenses=0,
                 remarks='', paid_member_name=''):
        self.paid = paid
        self.paid_date = paid_date
        self.type = type
        self.description = description
        self.participation_fee_income = participation_fee_income
        self.from_vs_team_income = from_vs_team_income
        self.other_income = other_income
        self.ground_fee_expenses = ground_fee_expenses
        self.umpire_fee_expenses = umpire_fee_expenses
        self.other_expenses = other_expenses
        self.remarks = remarks
        self.paid_member_name = paid_member_name

    def to_row(self):
        """
        스프레드시트에 쓸 16칸 행으로 변환

        수식 열은 None(JSON null)으로 남겨 두어
        Sheets API가 기존 값을 덮어쓰지 않도록 합니다.

        Returns:
            list: 길이 16의 셀 값 리스트
        """
        row = [None] * (PaymentColumn.LAST_COLUMN + 1)
        row[PaymentColumn.PAID] = self.paid
        row[PaymentColumn.PAID_DATE] = self.paid_date
        row[PaymentColumn.TYPE] = self.type
        row[PaymentColumn.DESCRIPTION] = self.description
        row[PaymentColumn.PARTICIPATION_FEE_INCOME] = self.participation_fee_income
        row[PaymentColumn.FROM_VS_TEAM_INCOME] = self.from_vs_team_income
        row[PaymentColumn.OTHER_INCOME] = self.other_income
        row[PaymentColumn.GROUND_FEE_EXPENSES] = self.ground_fee_expenses
        row[PaymentColumn.UMPIRE_FEE_EXPENSES] = self.umpire_fee_expenses
        row[PaymentColumn.OTHER_EXPENSES] = self.other_expenses
        row[PaymentColumn.REMARKS] = self.remarks
        row[PaymentColumn.PAID_MEMBER] = self.paid_member_name
        return row


class ScheduleDoc:
    """
    스케줄 문서 (schedules 컬렉션)

    Attributes:
        id (str): 문서 ID
        title (str): 제목
        place_name (str): 장소
        start (datetime): 시작 시간 (정규화된 aware datetime)
        end (datetime): 종료 시간
        is_deleted (bool): 삭제 플래그
    """
    def __init__(self, id, title, place_name, start, end, is_deleted=False):
        self.id = id
        self.title = title
        self.place_name = place_name
        self.start = start
        self.end = end
        self.is_deleted = is_deleted


class SettingKey:
    """settings 컬렉션의 문서 ID"""
    SCHEDULE_ANSWER_LIMIT_DAYS = 'SCHEDULE_ANSWER_LIMIT_DAYS'
    LINE_SEND_ANNOUNCE_BACH = 'LINE_SEND_ANNOUNCE_BACH'


class CallerIdentity:
    """
    인증된 호출자

    Attributes:
        uid (str): Firebase Authentication uid
        claims (dict): ID 토큰 클레임
    """
    def __init__(self, uid, claims=None):
        self.uid = uid
        self.claims = claims or {}

    def __repr__(self):
        return f"CallerIdentity(uid={self.uid!r})"
