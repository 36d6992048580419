from app.services.airplanes import MSG_TAKEN, MSG_TOO_SHORT


def _create(client, token, **fields):
    data = {"csrf_token": token, "description": ""}
    data.update(fields)
    return client.post("/airplanes", data=data, follow_redirects=False)


def test_index_empty(client):
    resp = client.get("/airplanes")
    assert resp.status_code == 200
    assert "No airplanes yet." in resp.text


def test_root_redirects_to_index(client):
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/airplanes"


def test_new_form_is_empty(client):
    resp = client.get("/airplanes/new")
    assert resp.status_code == 200
    assert 'name="name" value=""' in resp.text


def test_create_redirects_to_detail(client, csrf_token):
    resp = _create(client, csrf_token, name="SkyHigh Airlines", description="x")
    assert resp.status_code == 303
    location = resp.headers["location"]
    assert location.startswith("/airplanes/")

    detail = client.get(location)
    assert detail.status_code == 200
    assert "SkyHigh Airlines" in detail.text
    assert "Airplane was successfully created." in detail.text


def test_invalid_create_rerenders_form_with_errors(client, csrf_token):
    resp = _create(client, csrf_token, name="SkyHi")
    assert resp.status_code == 200
    assert MSG_TOO_SHORT in resp.text
    assert 'value="SkyHi"' in resp.text

    assert "No airplanes yet." in client.get("/airplanes").text


def test_duplicate_create_shows_taken(client, csrf_token):
    _create(client, csrf_token, name="SkyHigh Airlines")
    resp = _create(client, csrf_token, name="SkyHigh Airlines", description="y")
    assert resp.status_code == 200
    assert MSG_TAKEN in resp.text


def test_create_without_csrf_is_rejected(client):
    resp = client.post("/airplanes", data={"name": "SkyHigh Airlines"}, follow_redirects=False)
    assert resp.status_code == 400


def test_create_with_wrong_csrf_is_rejected(client, csrf_token):
    resp = _create(client, "not-the-token", name="SkyHigh Airlines")
    assert resp.status_code == 400


def test_extra_form_fields_are_ignored(client, csrf_token):
    resp = _create(client, csrf_token, name="SkyHigh Airlines", id="777")
    assert resp.status_code == 303
    assert resp.headers["location"] != "/airplanes/777"


def test_index_lists_created(client, csrf_token):
    for name in ("First Airline", "Second Airline"):
        _create(client, csrf_token, name=name)

    text = client.get("/airplanes").text
    assert text.index("First Airline") < text.index("Second Airline")


def test_show_unknown_is_404(client):
    resp = client.get("/airplanes/4242")
    assert resp.status_code == 404


def test_show_oversize_id_is_404(client):
    resp = client.get("/airplanes/" + "9" * 25)
    assert resp.status_code == 404
