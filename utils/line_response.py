"""
LINE 메시지 템플릿 함수

LINE Messaging API 메시지 객체의 반복적인 JSON 구조를
템플릿 함수로 추상화합니다. 여기서는 dict만 만들고 전송하지 않습니다.
"""

# LINE API 제한값
ALT_TEXT_MAX_LENGTH = 400
CAROUSEL_MAX_COLUMNS = 10


def text_message(text):
    """
    텍스트 메시지 생성

    Example:
        >>> text_message("안녕하세요")
        {"type": "text", "text": "안녕하세요"}
    """
    return {
        "type": "text",
        "text": text
    }


def uri_action(label, uri):
    """URI 액션 (버튼 클릭 시 링크 열기)"""
    return {
        "type": "uri",
        "label": label,
        "uri": uri
    }


def buttons_template(alt_text, title, text, actions):
    """
    Buttons 템플릿 메시지 생성

    Args:
        alt_text (str): 알림/미지원 단말에 표시되는 대체 텍스트
        title (str): 제목 (최대 40자)
        text (str): 본문 (제목이 있을 때 최대 60자)
        actions (list): 액션 리스트 (최대 4개)

    Returns:
        dict: LINE template 메시지
    """
    return {
        "type": "template",
        "altText": alt_text[:ALT_TEXT_MAX_LENGTH],
        "template": {
            "type": "buttons",
            "title": title,
            "text": text,
            "actions": actions
        }
    }


def carousel_column(title, text, actions):
    """Carousel의 한 칼럼"""
    return {
        "title": title,
        "text": text,
        "actions": actions
    }


def carousel_template(alt_text, columns):
    """
    Carousel 템플릿 메시지 생성

    Args:
        alt_text (str): 대체 텍스트
        columns (list): carousel_column() 리스트 (최대 10개,
            모든 칼럼의 액션 개수가 같아야 함)

    Returns:
        dict: LINE template 메시지
    """
    return {
        "type": "template",
        "altText": alt_text[:ALT_TEXT_MAX_LENGTH],
        "template": {
            "type": "carousel",
            "columns": columns
        }
    }
