"""
Test Club Profile, missions and the organization chart
"""
import os
import pytest
from fastapi import status

JPG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 32


def add_member(client, headers, name, role, parent_id=None, member_id=None, photo=None):
    data = {"name": name, "role": role}
    if parent_id is not None:
        data["parentId"] = parent_id
    if member_id is not None:
        data["id"] = member_id
    files = {"photo": (photo, JPG_BYTES, "image/jpeg")} if photo else None
    return client.post("/api/profile/structure", data=data, files=files, headers=headers)


class TestProfile:

    def test_seeded_profile_is_empty(self, test_client, member_headers):
        response = test_client.get("/api/profile", headers=member_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"history": "", "vision": "", "mission": [], "structure": []}

    def test_update_history_and_vision(self, test_client, admin_headers):
        response = test_client.patch(
            "/api/profile",
            json={"history": "Berdiri 2015", "vision": "Juara nasional"},
            headers=admin_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["history"] == "Berdiri 2015"
        assert response.json()["vision"] == "Juara nasional"

    def test_mission_list_is_fully_replaced(self, test_client, admin_headers):
        from robotikhub.database import get_db_context
        from robotikhub.models import Mission

        test_client.patch("/api/profile", json={"mission": ["A", "B"]}, headers=admin_headers)
        response = test_client.patch("/api/profile", json={"mission": ["C"]}, headers=admin_headers)

        assert response.json()["mission"] == ["C"]
        with get_db_context() as db:
            missions = db.query(Mission).all()
            assert [(m.position, m.text) for m in missions] == [(0, "C")]

    def test_partial_update_keeps_missions(self, test_client, admin_headers):
        test_client.patch("/api/profile", json={"mission": ["A", "B"]}, headers=admin_headers)

        response = test_client.patch("/api/profile", json={"vision": "Baru"}, headers=admin_headers)

        assert response.json()["mission"] == ["A", "B"]

    def test_member_cannot_update(self, test_client, member_headers):
        response = test_client.patch("/api/profile", json={"vision": "x"}, headers=member_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestOrganizationStructure:

    def test_insert_then_update_in_place(self, test_client, admin_headers):
        created = add_member(test_client, admin_headers, "Rudi", "Ketua")
        assert created.status_code == status.HTTP_201_CREATED
        member = created.json()
        assert member["parentId"] is None

        updated = add_member(test_client, admin_headers, "Rudi H.", "Ketua Umum", member_id=member["id"])

        assert updated.status_code == status.HTTP_200_OK
        assert updated.json()["id"] == member["id"]
        assert updated.json()["role"] == "Ketua Umum"
        structure = test_client.get("/api/profile", headers=admin_headers).json()["structure"]
        assert len(structure) == 1

    def test_unknown_id_inserts(self, test_client, admin_headers):
        response = add_member(test_client, admin_headers, "Baru", "Anggota", member_id="404")

        assert response.status_code == status.HTTP_201_CREATED

    def test_photo_replaced_only_when_uploaded(self, test_client, admin_headers, upload_dir):
        member = add_member(test_client, admin_headers, "Rudi", "Ketua", photo="rudi.jpg").json()
        first_file = os.path.join(upload_dir, member["photoUrl"].rsplit("/", 1)[1])

        kept = add_member(test_client, admin_headers, "Rudi", "Ketua", member_id=member["id"]).json()
        assert kept["photoUrl"] == member["photoUrl"]
        assert os.path.exists(first_file)

        replaced = add_member(test_client, admin_headers, "Rudi", "Ketua",
                              member_id=member["id"], photo="rudi-baru.jpg").json()
        assert replaced["photoUrl"] != member["photoUrl"]
        assert replaced["photoUrl"].endswith("rudi-baru.jpg")
        assert not os.path.exists(first_file)

    def test_parent_must_exist(self, test_client, admin_headers):
        response = add_member(test_client, admin_headers, "Yatim", "Anggota", parent_id="77")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_cycle_rejected(self, test_client, admin_headers):
        ketua = add_member(test_client, admin_headers, "Ketua", "Ketua").json()
        wakil = add_member(test_client, admin_headers, "Wakil", "Wakil", parent_id=ketua["id"]).json()

        self_parent = add_member(test_client, admin_headers, "Ketua", "Ketua",
                                 member_id=ketua["id"], parent_id=ketua["id"])
        cycle = add_member(test_client, admin_headers, "Ketua", "Ketua",
                           member_id=ketua["id"], parent_id=wakil["id"])

        assert self_parent.status_code == status.HTTP_400_BAD_REQUEST
        assert cycle.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_reparents_children(self, test_client, admin_headers):
        ketua = add_member(test_client, admin_headers, "Ketua", "Ketua").json()
        add_member(test_client, admin_headers, "Sekretaris", "Sekretaris", parent_id=ketua["id"])

        response = test_client.delete(f"/api/profile/structure/{ketua['id']}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        structure = test_client.get("/api/profile", headers=admin_headers).json()["structure"]
        assert [(m["name"], m["parentId"]) for m in structure] == [("Sekretaris", None)]

    def test_delete_missing(self, test_client, admin_headers):
        response = test_client.delete("/api/profile/structure/123", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_tree_endpoint(self, test_client, admin_headers, member_headers):
        ketua = add_member(test_client, admin_headers, "Ketua", "Ketua").json()
        add_member(test_client, admin_headers, "Wakil", "Wakil", parent_id=ketua["id"])
        add_member(test_client, admin_headers, "Pembina", "Pembina")

        tree = test_client.get("/api/profile/structure/tree", headers=member_headers).json()

        assert [node["name"] for node in tree] == ["Ketua", "Pembina"]
        assert [child["name"] for child in tree[0]["children"]] == ["Wakil"]

    def test_name_and_role_required(self, test_client, admin_headers):
        response = test_client.post("/api/profile/structure", data={"name": "Tanpa Jabatan"}, headers=admin_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestBuildTree:

    def test_forest_from_flat_list(self):
        from robotikhub.services.profile_service import build_tree

        members = [
            {"id": "1", "name": "Ketua", "parentId": None},
            {"id": "2", "name": "Wakil", "parentId": "1"},
            {"id": "3", "name": "Staf", "parentId": "2"},
            {"id": "4", "name": "Pembina", "parentId": None},
        ]

        tree = build_tree(members)

        assert [n["id"] for n in tree] == ["1", "4"]
        assert tree[0]["children"][0]["children"][0]["name"] == "Staf"

    @pytest.mark.parametrize("parent", ["99", "5"])
    def test_dangling_or_self_parent_becomes_root(self, parent):
        from robotikhub.services.profile_service import build_tree

        tree = build_tree([{"id": "5", "name": "X", "parentId": parent}])

        assert [n["id"] for n in tree] == ["5"]
