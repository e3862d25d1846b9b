import json

from sitecast.services.llm_client import GenerationError

PAGE_BODIES = [{"href": "https://example.org", "bodyText": "Example Org helps people."}]
CONTENT_REQUEST = {
    "pageBodies": PAGE_BODIES,
    "organizationName": "Example Org",
    "websiteURL": "https://example.org",
}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_description(client, llm):
    llm.text = "<h3>Example Org</h3>"

    response = client.post("/api/descriptions", json=CONTENT_REQUEST)

    assert response.status_code == 200
    assert response.json() == {"content": "<h3>Example Org</h3>"}


def test_excerpt(client):
    response = client.post("/api/excerpts", json=CONTENT_REQUEST)

    assert response.status_code == 200
    assert response.json()["content"]


def test_content_too_large_is_400(client, llm, settings):
    llm.count = lambda prompt: settings.token_ceiling + 1

    response = client.post("/api/descriptions", json=CONTENT_REQUEST)

    assert response.status_code == 400
    assert "Token limit exceeded" in response.json()["detail"]
    assert llm.prompts == []


def test_generation_failure_is_500(client, llm):
    llm.generate_error = GenerationError("down")

    response = client.post("/api/excerpts", json=CONTENT_REQUEST)

    assert response.status_code == 500


def test_malformed_request_is_400(client, llm):
    response = client.post("/api/descriptions", json={"pageBodies": "not a list"})

    assert response.status_code == 400
    assert llm.count_calls == []


def test_script(client):
    response = client.post("/api/scripts", json={**CONTENT_REQUEST, "promptType": 2})

    data = response.json()
    assert response.status_code == 200
    assert [s["speaker"] for s in data["scriptArray"]] == ["speaker1", "speaker2", "speaker1"]
    assert len(data["scriptArray"]) == len(data["script"].split("\n\n"))


def test_script_with_custom_prompt_variables(client, llm):
    custom_prompt = "Write about {organizationName} at {websiteURL}.\nINSERTBODIESHERE"

    response = client.post("/api/scripts", json={**CONTENT_REQUEST, "customPrompt": custom_prompt})

    assert response.status_code == 200
    assert llm.prompts[0] == (
        "Write about Example Org at https://example.org.\nWebsite Body Texts: \n"
        "https://example.org\nExample Org helps people."
    )


def test_script_custom_prompt_keeps_literal_braces(client, llm):
    custom_prompt = 'Answer as JSON like {"speaker": 1} about {mascot}.'

    response = client.post("/api/scripts", json={**CONTENT_REQUEST, "customPrompt": custom_prompt})

    assert response.status_code == 200
    assert llm.prompts[0].startswith('Answer as JSON like {"speaker": 1} about {mascot}.\n\nWebsite Body Texts: \n')


def test_audio_skips_failed_segment(client, speech_client):
    speech_client.failing = {"Second"}
    segments = [{"speaker": "speaker1", "text": "First"}, {"speaker": "speaker2", "text": "Second"},
                {"speaker": "speaker1", "text": "Third"}]

    response = client.post("/api/audio", json={"segments": segments, "voiceMode": 1})

    data = response.json()
    assert response.status_code == 200
    assert data["audioFiles"] == 2
    assert [f["index"] for f in data["savedFiles"]] == [0, 2]
    assert data["script"] == "First\n\nSecond\n\nThird"


def test_audio_rejects_oversized_segment(client, speech_client, settings):
    segments = [{"speaker": "speaker1", "text": "x" * (settings.tts_max_segment_bytes + 1)}]

    response = client.post("/api/audio", json={"segments": segments})

    assert response.status_code == 400
    assert speech_client.calls == []


def test_audio_measures_segment_length_in_bytes(client, speech_client, settings):
    text = "é" * (settings.tts_max_segment_bytes // 2 + 1)
    segments = [{"speaker": "speaker1", "text": "short"}, {"speaker": "speaker2", "text": text}]

    response = client.post("/api/audio", json={"segments": segments})

    assert len(text) < settings.tts_max_segment_bytes
    assert response.status_code == 400
    assert response.json()["detail"] == f"Segments [1] exceed {settings.tts_max_segment_bytes} bytes"
    assert speech_client.calls == []


def test_podcast(client):
    response = client.post("/api/podcasts", json={**CONTENT_REQUEST, "email": "info@example.org"})

    data = response.json()
    assert response.status_code == 200
    assert data["audioFiles"] == 3
    assert data["message"] == "Generated 3 audio segments for Example Org"


def test_scrape(client, llm):
    llm.priority_links = ["/about"]
    llm.basic_information = {"organizationName": "Example Org", "email": "info@example.org"}

    response = client.post("/api/scrape", json={"websiteURL": "example.org"})

    data = response.json()
    assert response.status_code == 200
    assert data["websiteURL"] == "example.org"
    assert data["pageBodies"] == [{"href": "https://example.org/about", "bodyText": "About us: founded in 1990."}]
    assert data["basicInformation"]["email"] == "info@example.org"


def test_scrape_failure_is_500(client):
    response = client.post("/api/scrape", json={"websiteURL": "unreachable.org"})

    assert response.status_code == 500


def test_scrape_missing_url_is_400(client):
    assert client.post("/api/scrape", json={}).status_code == 400
    assert client.post("/api/scrape", json={"websiteURL": "  "}).status_code == 400


def test_batch(client):
    response = client.post("/api/batch", json={"websites": ["example.org", "unreachable.org"]})

    data = response.json()
    assert response.status_code == 200
    assert [r["status"] for r in data["results"]] == ["completed", "error"]
    assert data["completed"] == 1
    assert data["failed"] == 1


def test_empty_batch_is_400(client):
    assert client.post("/api/batch", json={"websites": [" "]}).status_code == 400


def test_batch_export(client):
    results = [{"url": "https://example.org", "status": "completed", "organizationName": "Example Org"}]

    response = client.post("/api/batch/export", json={"results": results})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    assert response.text.splitlines()[1].startswith('"https://example.org","Example Org"')


def test_segments_import_and_export(client):
    imported = client.post("/api/segments/import", json={"text": "Hello.\n\nHi there."}).json()

    assert [s["speaker"] for s in imported["segments"]] == ["speaker1", "speaker2"]

    exported = client.post("/api/segments/export", json={"segments": imported["segments"]})

    assert json.loads(exported.content) == [
        {"speakerIndex": 0, "text": "Hello."},
        {"speakerIndex": 1, "text": "Hi there."},
    ]


def test_segments_import_invalid_json_is_400(client):
    response = client.post("/api/segments/import", json={"text": '[{"speakerIndex": 3, "text": "x"}]'})

    assert response.status_code == 400


def test_segments_import_wrapped_json_is_400(client):
    text = '{"segments": [{"speakerIndex": 0, "text": "Welcome."}]}'

    response = client.post("/api/segments/import", json={"text": text})

    assert response.status_code == 400
    assert "list of segments" in response.json()["detail"]


def test_segments_distribute(client):
    segments = [{"speaker": "speaker2", "text": "a"}, {"speaker": "speaker2", "text": "b"}]

    data = client.post("/api/segments/distribute", json={"segments": segments}).json()

    assert [s["speaker"] for s in data["segments"]] == ["speaker1", "speaker2"]
    assert data["script"] == "a\n\nb"


def test_script_download(client):
    response = client.post("/api/scripts/download", json={"script": "Hello", "fileName": "My: Show"})

    assert response.text == "Hello"
    assert response.headers["content-disposition"] == 'attachment; filename="My_ Show.txt"'


def test_script_download_with_non_ascii_name(client):
    response = client.post(
        "/api/scripts/download", json={"script": "Hola", "fileName": "Café Niño podcast ☕"}
    )

    assert response.status_code == 200
    assert response.text == "Hola"
    assert response.headers["content-disposition"] == (
        "attachment; filename=\"Cafe Nino podcast .txt\"; "
        "filename*=UTF-8''Caf%C3%A9%20Ni%C3%B1o%20podcast%20%E2%98%95.txt"
    )
