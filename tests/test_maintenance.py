"""POST /api/send-maintenance-email (multipart form)."""

URL = "/api/send-maintenance-email"

FORM = {
    "tenantName": "Aroha Smith",
    "tenantEmail": "aroha@example.com",
    "tenantPhone": "022 987 6543",
    "propertyAddress": "7 Hill Rd, Wellington",
    "issueTitle": "Leaking kitchen tap",
    "issueDescription": "Constant drip from the mixer.",
    "category": "plumbing",
    "priority": "high",
    "isEmergency": "false",
    "preferredContactTime": "evening",
}


def test_high_priority_request(client, gateway):
    resp = client.post(URL, data=FORM)

    assert resp.status_code == 200
    email = gateway.sent[0]
    assert email.subject == "HIGH Maintenance Request - Leaking kitchen tap"
    assert email.reply_to == "aroha@example.com"
    assert email.from_address == "Keyskeeper Maintenance <noreply@keyskeeper.co.nz>"
    assert "HIGH - Within 24 Hours" in email.html
    assert "#ea580c" in email.html
    assert "EMERGENCY REQUEST" not in email.html


def test_emergency_request(client, gateway):
    resp = client.post(URL, data={**FORM, "isEmergency": "true"})

    assert resp.status_code == 200
    email = gateway.sent[0]
    assert email.subject == "🚨 EMERGENCY Maintenance Request - Leaking kitchen tap"
    assert "EMERGENCY REQUEST" in email.html
    assert "within 2 hours" in email.html


def test_uploaded_image_names_are_listed(client, gateway):
    files = {
        "image_0": ("tap.jpg", b"\xff\xd8fake", "image/jpeg"),
        "image_1": ("under-sink.png", b"\x89PNGfake", "image/png"),
    }

    resp = client.post(URL, data=FORM, files=files)

    assert resp.status_code == 200
    assert "2 image(s) uploaded: tap.jpg, under-sink.png" in gateway.sent[0].html


def test_missing_issue_title_is_rejected(client, gateway):
    resp = client.post(URL, data={**FORM, "issueTitle": ""})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields"}
    assert gateway.sent == []


def test_priority_defaults_to_medium(client, gateway):
    form = {k: v for k, v in FORM.items() if k != "priority"}

    client.post(URL, data=form)

    assert gateway.sent[0].subject.startswith("MEDIUM Maintenance Request")
