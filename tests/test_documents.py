"""Tests for document upload, download proxy and unlinking on delete."""

from urllib.parse import quote

import pytest

from tripplanner.utils.storage import StorageError

PDF_BYTES = b"%PDF-1.4 sample travel document"


@pytest.fixture
def upload(client, owner_headers, trip):
    async def _upload(filename="passport.pdf", content=PDF_BYTES, content_type="application/pdf", headers=None, **form):
        return await client.post(
            f"/trips/{trip['id']}/documents/upload",
            files={"file": (filename, content, content_type)},
            data=form,
            headers=headers or owner_headers,
        )

    return _upload


class TestDocuments:
    @pytest.mark.asyncio
    async def test_upload_and_download(self, client, owner, owner_headers, trip, upload):
        resp = await upload(name="Dana passport", category="passport", tags="id, travel")
        assert resp.status_code == 201
        doc = resp.json()
        assert doc["category"] == "passport"
        assert doc["tags"] == ["id", "travel"]
        assert doc["mime_type"] == "application/pdf"
        assert doc["file_key"].startswith(f"documents/{owner.id}/{trip['id']}/")
        assert doc["file_key"].endswith("-passport.pdf")

        download = await client.get(f"/documents/{doc['id']}/download", headers=owner_headers)
        assert download.status_code == 200
        assert download.content == PDF_BYTES
        assert download.headers["content-type"] == "application/pdf"
        assert download.headers["content-disposition"] == f'inline; filename="{quote("Dana passport")}"'

    @pytest.mark.asyncio
    async def test_name_defaults_to_filename(self, upload):
        doc = (await upload(filename="ticket.pdf")).json()
        assert doc["name"] == "ticket.pdf"
        assert doc["category"] == "other"

    @pytest.mark.asyncio
    async def test_rejects_unsupported_type(self, upload):
        resp = await upload(filename="notes.txt", content=b"hello", content_type="text/plain")
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_rejects_empty_file(self, upload):
        resp = await upload(content=b"")
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_view_only_cannot_upload_but_can_download(self, client, upload, share_with):
        doc = (await upload()).json()
        headers = await share_with("view_only")
        assert (await upload(headers=headers)).status_code == 403
        assert (await client.get(f"/documents/{doc['id']}/download", headers=headers)).status_code == 200

    @pytest.mark.asyncio
    async def test_metadata_create_and_update(self, client, owner, owner_headers, trip):
        resp = await client.post(f"/trips/{trip['id']}/documents", json={
            "name": "Visa", "category": "visa", "file_url": "https://cdn.example.com/visa.pdf",
            "file_key": f"documents/{owner.id}/{trip['id']}/visa.pdf", "mime_type": "application/pdf",
        }, headers=owner_headers)
        assert resp.status_code == 201
        doc = resp.json()

        resp = await client.put(f"/documents/{doc['id']}", json={"tags": ["urgent"], "notes": "Renew"}, headers=owner_headers)
        assert resp.json()["tags"] == ["urgent"]
        assert resp.json()["name"] == "Visa"

    @pytest.mark.asyncio
    async def test_delete_unlinks_bookings_and_removes_file(self, client, owner_headers, trip, upload, storage):
        doc = (await upload()).json()
        hotel = (await client.post(f"/trips/{trip['id']}/hotels", json={
            "name": "Hotel Devin", "check_in_date": "2025-07-02", "check_out_date": "2025-07-04",
            "linked_document_id": doc["id"],
        }, headers=owner_headers)).json()
        assert storage._path(doc["file_key"]).is_file()

        resp = await client.delete(f"/documents/{doc['id']}", headers=owner_headers)
        assert resp.status_code == 200
        assert not storage._path(doc["file_key"]).exists()

        hotels = (await client.get(f"/trips/{trip['id']}/hotels", headers=owner_headers)).json()
        assert hotels[0]["id"] == hotel["id"]
        assert hotels[0]["linked_document_id"] is None

    @pytest.mark.asyncio
    async def test_delete_survives_missing_file(self, client, owner, owner_headers, trip):
        doc = (await client.post(f"/trips/{trip['id']}/documents", json={
            "name": "Ghost", "file_url": "/files/ghost.pdf", "file_key": f"documents/{owner.id}/{trip['id']}/ghost.pdf",
        }, headers=owner_headers)).json()
        assert (await client.delete(f"/documents/{doc['id']}", headers=owner_headers)).status_code == 200

    @pytest.mark.asyncio
    async def test_download_missing_file(self, client, owner, owner_headers, trip):
        doc = (await client.post(f"/trips/{trip['id']}/documents", json={
            "name": "Ghost", "file_url": "/files/ghost.pdf", "file_key": f"documents/{owner.id}/{trip['id']}/ghost.pdf",
        }, headers=owner_headers)).json()
        resp = await client.get(f"/documents/{doc['id']}/download", headers=owner_headers)
        assert resp.status_code == 502

    @pytest.mark.asyncio
    @pytest.mark.parametrize("suffix", ["../../1/1/passport.pdf", "../other/passport.pdf"])
    async def test_rejects_key_escaping_trip_prefix(self, client, owner, owner_headers, trip, suffix):
        resp = await client.post(f"/trips/{trip['id']}/documents", json={
            "name": "Escape", "file_url": "/files/x.pdf",
            "file_key": f"documents/{owner.id}/{trip['id']}/{suffix}",
        }, headers=owner_headers)
        assert resp.status_code == 400


class TestDocumentIsolation:
    @pytest.mark.asyncio
    async def test_cannot_register_another_tenants_file(self, client, make_user, headers_for, upload, storage):
        doc = (await upload()).json()

        outsider = await make_user(name="Eli Outsider")
        outsider_headers = headers_for(outsider)
        own_trip = (await client.post("/trips", json={
            "name": "Vienna Weekend", "destination": "Vienna",
            "start_date": "2025-08-01", "end_date": "2025-08-03",
        }, headers=outsider_headers)).json()

        resp = await client.post(f"/trips/{own_trip['id']}/documents", json={
            "name": "Not mine", "file_url": doc["file_url"], "file_key": doc["file_key"],
        }, headers=outsider_headers)
        assert resp.status_code == 400

        listed = (await client.get(f"/trips/{own_trip['id']}/documents", headers=outsider_headers)).json()
        assert listed == []
        assert storage._path(doc["file_key"]).read_bytes() == PDF_BYTES

    @pytest.mark.asyncio
    async def test_outsider_cannot_download_or_delete(self, client, make_user, headers_for, upload, storage):
        doc = (await upload()).json()
        outsider_headers = headers_for(await make_user())

        assert (await client.get(f"/documents/{doc['id']}/download", headers=outsider_headers)).status_code == 404
        assert (await client.delete(f"/documents/{doc['id']}", headers=outsider_headers)).status_code == 404
        assert storage._path(doc["file_key"]).is_file()


class TestLocalFileStorage:
    @pytest.mark.asyncio
    async def test_put_get_delete(self, storage):
        url = await storage.put("documents/1/2/abc-visa.pdf", PDF_BYTES, "application/pdf")
        assert url == "/files/documents/1/2/abc-visa.pdf"
        assert await storage.get("documents/1/2/abc-visa.pdf") == PDF_BYTES

        await storage.delete("documents/1/2/abc-visa.pdf")
        with pytest.raises(StorageError):
            await storage.get("documents/1/2/abc-visa.pdf")
        # Deleting twice is harmless
        await storage.delete("documents/1/2/abc-visa.pdf")

    @pytest.mark.asyncio
    async def test_key_outside_base_dir(self, storage):
        with pytest.raises(StorageError):
            await storage.put("../escape.pdf", PDF_BYTES)
