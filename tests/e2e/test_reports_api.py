"""End-to-end tests for the report endpoint."""

from uuid import uuid4


class TestReportEndpoint:
    """Report submission over HTTP."""

    def test_submit_report(self, client, make_auth):
        response = client.post(
            "/reports",
            json={"postId": str(uuid4()), "reason": "spam", "description": "ads"},
            headers=make_auth(),
        )

        assert response.status_code == 201
        assert response.json() == {
            "message": "Report submitted. Thank you for helping keep the community safe."
        }

    def test_report_without_target_rejected(self, client, make_auth):
        response = client.post(
            "/reports", json={"reason": "spam"}, headers=make_auth()
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Must specify post or comment to report"}

    def test_report_with_unknown_reason_rejected(self, client, make_auth):
        response = client.post(
            "/reports",
            json={"commentId": str(uuid4()), "reason": "boring"},
            headers=make_auth(),
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid report reason"}

    def test_report_requires_auth(self, client):
        response = client.post(
            "/reports", json={"postId": str(uuid4()), "reason": "spam"}
        )

        assert response.status_code == 401
