"""스케줄 알림 API / 정기 공지 테스트"""

from datetime import datetime, timedelta, timezone

from routes.schedule_routes import announce_schedule_batch
from tests.fakes import AUTH_HEADERS, schedule_data


NOW = datetime(2024, 4, 1, 0, 0, tzinfo=timezone.utc)


def add_schedule(services, schedule_id, title, start, **extra):
    data = schedule_data(title, start)
    data.update(extra)
    services.db.data.setdefault("schedules", {})[schedule_id] = data


def set_setting(services, key, value):
    services.db.data.setdefault("settings", {})[key] = {"value": value}


class TestSendScheduleAddedMessage:
    def test_requires_auth(self, client, services):
        add_schedule(services, 's1', '練習', NOW)

        response = client.post('/sendScheduleAddedMessage', json={"data": {"scheduleId": 's1'}})

        assert response.status_code == 403
        assert services.notice_line.pushes == []

    def test_push_to_default_group(self, client, services):
        add_schedule(services, 's1', '練習', NOW)

        response = client.post(
            '/sendScheduleAddedMessage',
            json={"data": {"scheduleId": 's1'}},
            headers=AUTH_HEADERS
        )

        assert response.status_code == 200
        assert response.get_json() == {"result": {"result": "sent", "to": "Cgroup"}}
        push = services.notice_line.pushes[0]
        assert push["to"] == 'Cgroup'
        template = push["messages"][0]["template"]
        assert template["text"].startswith('予定が追加されました')
        assert template["actions"][0]["uri"] == 'https://team.example.com/member/schedule/s1'

    def test_push_to_requested_id(self, client, services):
        add_schedule(services, 's1', '練習', NOW)

        client.post(
            '/sendScheduleChangedMessage',
            json={"data": {"scheduleId": 's1', "toId": 'U123'}},
            headers=AUTH_HEADERS
        )

        push = services.notice_line.pushes[0]
        assert push["to"] == 'U123'
        assert push["messages"][0]["template"]["text"].startswith('予定が変更されました')

    def test_unknown_schedule(self, client, services):
        response = client.post(
            '/sendScheduleAddedMessage',
            json={"data": {"scheduleId": 'missing'}},
            headers=AUTH_HEADERS
        )

        assert response.status_code == 400
        error = response.get_json()["error"]
        assert error["status"] == 'INVALID_ARGUMENT'
        assert error["details"] == {"scheduleId": 'missing'}
        assert services.notice_line.pushes == []

    def test_missing_schedule_id(self, client):
        response = client.post('/sendScheduleAddedMessage', json={"data": {}}, headers=AUTH_HEADERS)
        assert response.status_code == 400

    def test_no_target_configured(self, app, client, services):
        app.config['LINE_GROUP_ID'] = ''
        add_schedule(services, 's1', '練習', NOW)

        response = client.post(
            '/sendScheduleAddedMessage',
            json={"data": {"scheduleId": 's1'}},
            headers=AUTH_HEADERS
        )

        assert response.status_code == 400
        assert services.notice_line.pushes == []


class TestSendScheduleReminder:
    def test_multicast_filters_empty_ids(self, client, services):
        add_schedule(services, 's1', '練習', NOW)

        response = client.post(
            '/sendScheduleReminder',
            json={"data": {"scheduleId": 's1', "toIds": ['', 'U1', '', 'U2']}},
            headers=AUTH_HEADERS
        )

        assert response.get_json() == {"result": {"result": "sent", "to": ['U1', 'U2']}}
        multicast = services.line.multicasts[0]
        assert multicast["to"] == ['U1', 'U2']
        assert multicast["messages"][0]["template"]["text"].startswith('出欠の回答をお願いします')

    def test_no_target(self, client, services):
        add_schedule(services, 's1', '練習', NOW)

        response = client.post(
            '/sendScheduleReminder',
            json={"data": {"scheduleId": 's1', "toIds": ['', '']}},
            headers=AUTH_HEADERS
        )

        assert response.get_json() == {"result": {"result": "noTarget"}}
        assert services.line.multicasts == []


class TestAnnounceScheduleBatch:
    def run(self, app, services):
        with app.app_context():
            return announce_schedule_batch(services, app.config, now=NOW)

    def test_disabled_without_flag(self, app, services):
        add_schedule(services, 's1', '練習', NOW + timedelta(days=1))

        assert self.run(app, services) == {"result": "disabled"}
        assert services.notice_line.pushes == []

    def test_no_due_schedule(self, app, services):
        set_setting(services, 'LINE_SEND_ANNOUNCE_BACH', True)
        add_schedule(services, 's1', '練習', NOW + timedelta(days=25))

        assert self.run(app, services) == {"result": "noSchedule"}
        assert services.notice_line.pushes == []

    def test_announces_due_schedules(self, app, services):
        set_setting(services, 'LINE_SEND_ANNOUNCE_BACH', True)
        set_setting(services, 'SCHEDULE_ANSWER_LIMIT_DAYS', 10)
        add_schedule(services, 'late', '遅い', NOW + timedelta(days=8))
        add_schedule(services, 'soon', '近い', NOW + timedelta(days=2))
        add_schedule(services, 'far', '遠い', NOW + timedelta(days=15))
        add_schedule(services, 'gone', '削除', NOW + timedelta(days=3), isDeleted=True)

        result = self.run(app, services)

        assert result == {"result": "sent", "to": "Cgroup"}
        push = services.notice_line.pushes[0]
        banner, carousel = push["messages"]
        assert banner["type"] == 'text'
        titles = [column["title"] for column in carousel["template"]["columns"]]
        assert titles == ['近い', '遅い']

    def test_untitled_schedule(self, app, services):
        set_setting(services, 'LINE_SEND_ANNOUNCE_BACH', True)
        add_schedule(services, 's1', None, NOW + timedelta(days=1))

        assert self.run(app, services) == {"result": "sent", "to": "Cgroup"}
        carousel = services.notice_line.pushes[0]["messages"][1]
        assert carousel["template"]["columns"][0]["title"] == ''

    def test_cli_command(self, app, services):
        set_setting(services, 'LINE_SEND_ANNOUNCE_BACH', False)

        result = app.test_cli_runner().invoke(args=['announce-schedules'])

        assert result.exit_code == 0
        assert 'cron: 0 9 * * 1 Asia/Tokyo' in result.output
        assert 'disabled' in result.output
