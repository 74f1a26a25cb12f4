"""
Tests for the mods, accounts and catalog routers.

The app runs against the in-memory database from the ``client`` fixture.
"""


class TestModRoutes:
    """Tests for /mods endpoints."""

    def test_upload_and_get(self, client, mod_payload):
        response = client.post("/mods", json=mod_payload)
        assert response.status_code == 201

        response = client.get("/mods/Foo")
        assert response.status_code == 200
        data = response.json()
        assert data["modName"] == "Foo"
        assert data["gameName"] == "Minecraft"
        assert data["tags"] == ["a", "b"]

    def test_upload_duplicate_name_ignoring_case(self, client, mod_payload):
        client.post("/mods", json=mod_payload)

        response = client.post("/mods", json={**mod_payload, "modName": "FOO"})

        assert response.status_code == 409

    def test_get_missing_mod(self, client):
        response = client.get("/mods/Ghost")

        assert response.status_code == 404
        assert response.json()["detail"] == "Mod does not exist"

    def test_list_mods(self, client, mod_payload):
        assert client.get("/mods").json() == {"data": []}

        client.post("/mods", json=mod_payload)
        client.post("/mods", json={**mod_payload, "modName": "Bar"})

        data = client.get("/mods").json()["data"]
        assert sorted(m["modName"] for m in data) == ["Bar", "Foo"]

    def test_search_with_regex_filter(self, client, mod_payload):
        client.post("/mods", json={**mod_payload, "modName": "foobar"})
        client.post("/mods", json={**mod_payload, "modName": "Baz"})

        response = client.post(
            "/mods/search",
            json={"modName": {"$regex": "^Foo", "$options": "i"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["num"] == 1
        assert data["data"][0]["modName"] == "foobar"

    def test_search_without_match(self, client, mod_payload):
        client.post("/mods", json=mod_payload)

        response = client.post("/mods/search", json={"author": "nobody"})

        assert response.status_code == 404

    def test_search_by_tags(self, client, mod_payload):
        client.post("/mods", json={**mod_payload, "modName": "Foo", "tags": ["a", "b"]})
        client.post("/mods", json={**mod_payload, "modName": "Bar", "tags": ["b", "c"]})

        response = client.get("/mods/tags/search", params=[("tag", "a"), ("tag", "b")])

        assert response.status_code == 200
        assert [m["modName"] for m in response.json()["data"]] == ["Foo"]
        assert client.get("/mods/tags/search", params={"tag": "zzz"}).status_code == 404

    def test_search_with_non_string_options(self, client, mod_payload):
        client.post("/mods", json=mod_payload)

        response = client.post(
            "/mods/search",
            json={"modName": {"$regex": "^F", "$options": None}},
        )

        assert response.status_code == 404

    def test_names_matching_route_segments_are_reachable(self, client, mod_payload):
        for name in ("search", "tags", "by-tags"):
            assert client.post("/mods", json={**mod_payload, "modName": name}).status_code == 201

        for name in ("search", "tags", "by-tags"):
            response = client.get(f"/mods/{name}")
            assert response.status_code == 200
            assert response.json()["modName"] == name

    def test_upload_drops_duplicate_tags(self, client, mod_payload):
        client.post("/mods", json={**mod_payload, "tags": ["a", "b", "a"]})

        assert client.get("/mods/Foo").json()["tags"] == ["a", "b"]

    def test_replace_mod(self, client, mod_payload):
        client.post("/mods", json=mod_payload)

        response = client.put("/mods/Foo", json={**mod_payload, "modName": "Qux", "desc": "New"})

        assert response.status_code == 204
        assert client.get("/mods/Foo").status_code == 404
        assert client.get("/mods/Qux").json()["desc"] == "New"

    def test_replace_with_taken_name(self, client, mod_payload):
        client.post("/mods", json=mod_payload)
        client.post("/mods", json={**mod_payload, "modName": "Bar"})

        response = client.put("/mods/Foo", json={**mod_payload, "modName": "Bar"})

        assert response.status_code == 409

    def test_delete_mod(self, client, mod_payload):
        client.post("/mods", json=mod_payload)

        assert client.delete("/mods/Foo").status_code == 204
        assert client.delete("/mods/Foo").status_code == 409

    def test_delete_all_mods(self, client, mod_payload):
        assert client.delete("/mods").status_code == 404

        client.post("/mods", json=mod_payload)

        assert client.delete("/mods").status_code == 204
        assert client.get("/mods").json() == {"data": []}

    def test_update_tags(self, client, mod_payload):
        client.post("/mods", json={**mod_payload, "tags": ["a", "b"]})

        response = client.patch("/mods/Foo/tags", json={"add": ["c", "a"], "delete": ["b"]})

        assert response.status_code == 204
        assert client.get("/mods/Foo").json()["tags"] == ["a", "c"]

    def test_update_tags_missing_mod(self, client):
        response = client.patch("/mods/Ghost/tags", json={"add": ["a"]})

        assert response.status_code == 404

    def test_views_and_likes(self, client, mod_payload):
        client.post("/mods", json=mod_payload)

        assert client.post("/mods/Foo/views").status_code == 204
        assert client.post("/mods/Foo/likes", params={"change": 1}).status_code == 204
        assert client.post("/mods/Foo/likes", params={"change": 1}).status_code == 204
        assert client.post("/mods/Foo/likes", params={"change": -1}).status_code == 204

        data = client.get("/mods/Foo").json()
        assert data["views"] == 1
        assert data["likes"] == 1

    def test_views_on_missing_mod(self, client):
        assert client.post("/mods/Ghost/views").status_code == 404
        assert client.post("/mods/Ghost/likes").status_code == 404

    def test_comments(self, client, mod_payload):
        client.post("/mods", json=mod_payload)

        response = client.post("/mods/Foo/comments", json={"username": "bob", "content": "Nice"})
        assert response.status_code == 204
        assert client.get("/mods/Foo").json()["comments"] == [
            {"username": "bob", "content": "Nice"}
        ]

        assert client.delete("/mods/Foo/comments").status_code == 204
        assert client.get("/mods/Foo").json()["comments"] == []


class TestAccountRoutes:
    """Tests for /accounts endpoints."""

    def test_signup_and_get(self, client):
        response = client.post("/accounts", json={"username": "alice", "password": "secret"})

        assert response.status_code == 201
        assert response.json() == {"username": "alice", "favoriteModNames": []}

        data = client.get("/accounts/alice").json()
        assert data["username"] == "alice"
        assert "password" not in data

    def test_signup_duplicate(self, client):
        client.post("/accounts", json={"username": "alice", "password": "secret"})

        response = client.post("/accounts", json={"username": "alice", "password": "other"})

        assert response.status_code == 409

    def test_get_missing_account(self, client):
        assert client.get("/accounts/nobody").status_code == 404

    def test_list_and_search_accounts(self, client):
        client.post("/accounts", json={"username": "alice", "password": "a"})
        client.post("/accounts", json={"username": "albert", "password": "b"})
        client.post("/accounts", json={"username": "bob", "password": "c"})

        assert client.get("/accounts").json()["num"] == 3

        response = client.post("/accounts/search", json={"username": {"$regex": "^al"}})
        assert response.status_code == 200
        assert sorted(a["username"] for a in response.json()["data"]) == ["albert", "alice"]

        assert client.post("/accounts/search", json={"username": "zed"}).status_code == 404

    def test_change_password(self, client):
        client.post("/accounts", json={"username": "alice", "password": "old"})

        response = client.put(
            "/accounts/alice/password",
            json={"oldPassword": "wrong", "newPassword": "new"},
        )
        assert response.status_code == 401

        response = client.put(
            "/accounts/alice/password",
            json={"oldPassword": "old", "newPassword": "new"},
        )
        assert response.status_code == 204

        response = client.put(
            "/accounts/alice/password",
            json={"oldPassword": "old", "newPassword": "newer"},
        )
        assert response.status_code == 401

    def test_change_password_missing_account(self, client):
        response = client.put(
            "/accounts/nobody/password",
            json={"oldPassword": "old", "newPassword": "new"},
        )

        assert response.status_code == 401

    def test_add_favorite(self, client):
        client.post("/accounts", json={"username": "alice", "password": "secret"})

        response = client.post("/accounts/alice/favorites", json={"modName": "Foo"})
        assert response.status_code == 204

        response = client.post("/accounts/alice/favorites", json={"modName": "Foo"})
        assert response.status_code == 409

        assert client.get("/accounts/alice").json()["favoriteModNames"] == ["Foo"]

    def test_delete_accounts(self, client):
        assert client.delete("/accounts").status_code == 404

        client.post("/accounts", json={"username": "alice", "password": "secret"})
        client.post("/accounts", json={"username": "bob", "password": "secret"})

        assert client.delete("/accounts/alice").status_code == 204
        assert client.delete("/accounts/alice").status_code == 409
        assert client.delete("/accounts").status_code == 204
        assert client.get("/accounts").json()["num"] == 0


class TestCatalogRoutes:
    """Tests for /tags and /games."""

    def test_list_tags(self, client, mod_payload):
        client.post("/mods", json={**mod_payload, "modName": "Foo", "tags": ["a", "b"]})
        client.post("/mods", json={**mod_payload, "modName": "Bar", "tags": ["b", "c"]})

        response = client.get("/tags")

        assert response.status_code == 200
        assert sorted(response.json()["tag"]) == ["a", "b", "c"]

    def test_list_games(self, client):
        response = client.get("/games")

        assert response.status_code == 200
        assert response.json() == {"Games": ["Minecraft", "Terraria"]}
