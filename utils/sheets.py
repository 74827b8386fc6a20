"""
Google Sheets API 래퍼

범위 읽기(get)와 범위 쓰기(update) 두 가지만 제공합니다.
"""

import logging

import google.auth
from googleapiclient.discovery import build


SHEETS_SCOPES = ['https://www.googleapis.com/auth/spreadsheets']

logger = logging.getLogger(__name__)


def build_range(sheet_name, start_cell, end_cell):
    """
    A1 표기 범위 문자열 생성

    Example:
        >>> build_range("明細", "A1", "S211")
        '明細!A1:S211'
    """
    return f"{sheet_name}!{start_cell}:{end_cell}"


class SheetsClient:
    """
    스프레드시트 하나에 대한 값 읽기/쓰기

    Args:
        spreadsheet_id (str): 대상 스프레드시트 ID
        service: googleapiclient의 sheets v4 리소스 (None이면 ADC로 생성)
    """

    def __init__(self, spreadsheet_id, service=None):
        self.spreadsheet_id = spreadsheet_id
        self._service = service

    @property
    def service(self):
        if self._service is None:
            self._service = create_sheets_service()
        return self._service

    def get_values(self, range_name):
        """
        범위의 값을 2차원 리스트로 반환

        Returns:
            list: 행 리스트 (값이 없으면 빈 리스트)
        """
        result = self.service.spreadsheets().values().get(
            spreadsheetId=self.spreadsheet_id,
            range=range_name
        ).execute()
        return result.get('values', [])

    def update_values(self, range_name, values, value_input_option='USER_ENTERED'):
        """
        범위에 값 쓰기

        USER_ENTERED는 숫자/불리언을 문자열이 아닌 값으로 해석합니다.
        None 셀은 기존 값을 그대로 둡니다.
        """
        return self.service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
            valueInputOption=value_input_option,
            body={"values": values}
        ).execute()


def create_sheets_service():
    """
    Application Default Credentials로 Sheets API 리소스 생성

    Raises:
        google.auth.exceptions.DefaultCredentialsError: 인증 정보가 없을 때
    """
    credentials, _ = google.auth.default(scopes=SHEETS_SCOPES)
    logger.info("Google Sheets service created")
    return build('sheets', 'v4', credentials=credentials, cache_discovery=False)
