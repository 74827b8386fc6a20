"""
회계 장부 행 추가 로직

明細 시트를 위에서부터 훑어 "날짜" 칸이 비어 있는 첫 행에 기록합니다.
빈 행이 없으면 마지막 행 다음에 추가합니다.

Note:
    읽기 → 쓰기 사이에 잠금이 없으므로 동시에 호출되면
    같은 행을 덮어쓸 수 있습니다.
"""

import logging

from models import PaymentColumn
from utils.sheets import build_range


logger = logging.getLogger(__name__)


def find_insertion_index(rows):
    """
    기록할 행의 인덱스 (가져온 범위 기준 0부터)

    Args:
        rows (list): Sheets API가 돌려준 행 리스트 (1행은 헤더)

    Returns:
        int: 날짜 칸이 비어 있는 첫 행의 인덱스, 없으면 len(rows)

    Example:
        >>> find_insertion_index([["精算", "日付"], [True, "2024/04/01"], [False, ""]])
        2
        >>> find_insertion_index([["精算", "日付"], [True, "2024/04/01"]])
        2
    """
    for index, row in enumerate(rows):
        if len(row) <= PaymentColumn.PAID_DATE or not row[PaymentColumn.PAID_DATE]:
            return index
    return len(rows)


def append_payment(sheets, record, sheet_name, end_cell):
    """
    결제 기록을 장부에 한 행 추가

    Args:
        sheets (SheetsClient): 회계 스프레드시트 클라이언트
        record (PaymentRecord): 검증된 결제 기록
        sheet_name (str): 대상 시트 이름 (明細)
        end_cell (str): 읽기 범위의 끝 셀 (S211), 쓰기는 같은 열까지 한 행만

    Returns:
        dict: {"updatedRange": str, "rowNumber": int}
        None: 시트에 데이터가 없는 경우 (아무것도 쓰지 않음)
    """
    rows = sheets.get_values(build_range(sheet_name, 'A1', end_cell))
    if not rows:
        logger.info("데이터가 존재하지 않습니다.")
        return None

    empty_row_index = find_insertion_index(rows)
    logger.info(f"빈 행 인덱스: {empty_row_index}")

    row_value = record.to_row()
    logger.debug(f"업데이트할 데이터: {row_value}")

    row_number = empty_row_index + 1
    end_column = end_cell.rstrip('0123456789')
    target_range = build_range(sheet_name, f"A{row_number}", f"{end_column}{row_number}")
    sheets.update_values(target_range, [row_value], value_input_option='USER_ENTERED')

    logger.info(f"A{row_number} 행에 데이터를 기록했습니다: {row_value}")
    return {
        "updatedRange": target_range,
        "rowNumber": row_number
    }
