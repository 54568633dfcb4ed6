from acrossmedia.shared.services.notification_service import (
    NotificationDispatcher,
    NotificationTemplate,
    render,
)

from conftest import FakeTransport


APPROVAL_DATA = {
    "username": "alice",
    "email": "alice@example.com",
    "registered_at": "2025-03-01T09:00:00+00:00",
    "approval_link": "http://api.test/api/auth/approve/abc",
}


def test_approval_request_contains_link_and_account():
    email = render(NotificationTemplate.APPROVAL_REQUEST, APPROVAL_DATA)

    assert "Approval Required" in email.subject
    assert "http://api.test/api/auth/approve/abc" in email.html_body
    assert "alice@example.com" in email.html_body


def test_contact_submission_escapes_user_input():
    email = render(
        NotificationTemplate.CONTACT_SUBMISSION,
        {
            "name": "Mallory",
            "email": "m@example.com",
            "subject": "Hello there",
            "message": "<script>alert(1)</script>",
        },
    )

    assert "<script>" not in email.html_body
    assert "&lt;script&gt;" in email.html_body


async def test_send_reports_delivery():
    transport = FakeTransport()
    dispatcher = NotificationDispatcher(transport)

    result = await dispatcher.send("admin@example.com", NotificationTemplate.APPROVAL_REQUEST, APPROVAL_DATA)

    assert result.delivered
    assert transport.recipients() == ["admin@example.com"]


async def test_send_never_raises_on_transport_failure():
    dispatcher = NotificationDispatcher(FakeTransport(fail_for={"down@example.com"}))

    result = await dispatcher.send("down@example.com", NotificationTemplate.APPROVAL_REQUEST, APPROVAL_DATA)

    assert not result.delivered
    assert "SMTP delivery failed" in result.error


async def test_send_never_raises_on_bad_template_data():
    dispatcher = NotificationDispatcher(FakeTransport())

    result = await dispatcher.send("admin@example.com", NotificationTemplate.APPROVAL_GRANTED, {})

    assert not result.delivered


async def test_send_many_isolates_failures():
    transport = FakeTransport(fail_for={"b@example.com"})
    dispatcher = NotificationDispatcher(transport)

    results = await dispatcher.send_many(
        ["a@example.com", "b@example.com", "c@example.com"],
        NotificationTemplate.APPROVAL_REQUEST,
        APPROVAL_DATA,
    )

    assert [result.delivered for result in results] == [True, False, True]
    assert sorted(transport.recipients()) == ["a@example.com", "c@example.com"]
