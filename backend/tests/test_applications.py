PROFESSOR = {"X-User-Id": "u1"}
STUDENT = {"X-User-Id": "u2"}


class TestApplying:
    def _apply(self, client, post_id="4", **overrides):
        body = {
            "resume_link": "https://example.com/cv.pdf",
            "statement": "I would like to join the lab.",
        }
        body.update(overrides)
        return client.post(f"/api/v1/postings/{post_id}/applications", json=body, headers={"X-User-Id": "u5"})

    def test_apply(self, client):
        r = self._apply(client, post_id="1")
        assert r.status_code == 201
        data = r.json()
        assert data["status"] == "SUBMITTED"
        assert data["student_id"] == "u5"
        assert data["student_school_id"] == "121010456"
        assert data["rejection_reason"] is None

    def test_apply_to_competitive_posting(self, client):
        assert self._apply(client, post_id="2").status_code == 201

    def test_cannot_apply_to_closed_posting(self, client):
        r = self._apply(client, post_id="3")
        assert r.status_code == 409

    def test_statement_limit(self, client):
        assert self._apply(client, post_id="2", statement="x" * 500).status_code == 201
        assert self._apply(client, post_id="2", statement="x" * 501).status_code == 400

    def test_malformed_resume_link(self, client):
        r = self._apply(client, post_id="2", resume_link="not a url")
        assert r.status_code == 400

    def test_unknown_posting(self, client):
        assert self._apply(client, post_id="999").status_code == 404

    def test_professors_cannot_apply(self, client):
        r = client.post("/api/v1/postings/1/applications", json={
            "resume_link": "https://example.com/cv.pdf",
        }, headers=PROFESSOR)
        assert r.status_code == 403

    def test_my_applications_in_stored_order(self, client):
        r = client.get("/api/v1/applications/mine", headers=STUDENT)
        assert r.status_code == 200
        assert [a["id"] for a in r.json()] == ["a1", "a4"]


class TestReview:
    def _status(self, client, app_id, status, reason=None):
        body = {"status": status}
        if reason is not None:
            body["reason"] = reason
        return client.post(f"/api/v1/applications/{app_id}/status", json=body, headers=PROFESSOR)

    def _applicant(self, client, post_id, app_id):
        r = client.get(f"/api/v1/postings/{post_id}/applications", headers=PROFESSOR)
        return next(a for a in r.json() if a["id"] == app_id)

    def test_mark_viewed(self, client):
        r = self._status(client, "a1", "VIEWED")
        assert r.status_code == 200
        assert r.json()["pending_reason"] is False
        assert r.json()["application"]["status"] == "VIEWED"

    def test_reject_without_reason_then_confirm(self, client):
        r = self._status(client, "a1", "REJECTED")
        assert r.status_code == 200
        assert r.json()["pending_reason"] is True
        assert r.json()["application"]["status"] == "SUBMITTED"
        assert self._applicant(client, "1", "a1")["rejection_pending"] is True

        r = client.post("/api/v1/applications/a1/rejection", json={"reason": "No fit"}, headers=PROFESSOR)
        assert r.status_code == 200
        assert r.json()["status"] == "REJECTED"
        assert r.json()["rejection_reason"] == "No fit"
        assert r.json()["rejection_pending"] is False

    def test_confirm_with_blank_reason_keeps_draft(self, client):
        self._status(client, "a1", "REJECTED")
        r = client.post("/api/v1/applications/a1/rejection", json={"reason": "   "}, headers=PROFESSOR)
        assert r.status_code == 400
        applicant = self._applicant(client, "1", "a1")
        assert applicant["status"] == "SUBMITTED"
        assert applicant["rejection_pending"] is True

    def test_cancel_rejection(self, client):
        self._status(client, "a1", "REJECTED")
        r = client.delete("/api/v1/applications/a1/rejection", headers=PROFESSOR)
        assert r.status_code == 200
        assert r.json()["status"] == "SUBMITTED"
        assert r.json()["rejection_pending"] is False

        r = client.post("/api/v1/applications/a1/rejection", json={"reason": "No fit"}, headers=PROFESSOR)
        assert r.status_code == 404

    def test_confirm_without_pending_rejection(self, client):
        r = client.post("/api/v1/applications/a1/rejection", json={"reason": "No fit"}, headers=PROFESSOR)
        assert r.status_code == 404
        assert "No pending rejection" in r.json()["detail"]

        r = client.post("/api/v1/applications/nope/rejection", json={"reason": "No fit"}, headers=PROFESSOR)
        assert r.status_code == 404

    def test_reject_with_reason_in_one_step(self, client):
        r = self._status(client, "a2", "REJECTED", reason="Schedule conflict")
        assert r.json()["pending_reason"] is False
        assert r.json()["application"]["rejection_reason"] == "Schedule conflict"

    def test_terminal_application_rejects_changes(self, client):
        r = self._status(client, "a3", "INTERVIEW")
        assert r.status_code == 409

    def test_reopen_when_enabled_clears_reason(self, client):
        from ra_board.config import settings
        settings.allow_reopen = True

        r = self._status(client, "a3", "VIEWED")
        assert r.status_code == 200
        assert r.json()["application"]["status"] == "VIEWED"
        assert r.json()["application"]["rejection_reason"] is None

    def test_unknown_application(self, client):
        assert self._status(client, "nope", "VIEWED").status_code == 404

    def test_students_cannot_review(self, client):
        r = client.post("/api/v1/applications/a1/status", json={"status": "VIEWED"}, headers=STUDENT)
        assert r.status_code == 403

    def test_hide_rejected_applicants(self, client):
        r = client.get("/api/v1/postings/4/applications?include_rejected=false", headers=PROFESSOR)
        assert [a["id"] for a in r.json()] == ["a4"]

        r = client.get("/api/v1/postings/4/applications", headers=PROFESSOR)
        assert [a["id"] for a in r.json()] == ["a3", "a4"]

    def test_applicants_of_unknown_posting(self, client):
        r = client.get("/api/v1/postings/999/applications", headers=PROFESSOR)
        assert r.status_code == 404
