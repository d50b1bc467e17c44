"""Catalog routes — material types, genres and the nested patron listing.

Invariants:
    - /api/materialTypes and /api/genres list every row
    - /api/patrons lists inactive patrons too
    - /api/patrons includes returned and outstanding checkouts, each with
      its material, and each material with its type and genre
"""


async def test_material_types_listing(client, seed_catalog):
    res = await client.get("/api/materialTypes")
    assert res.status_code == 200
    assert sorted(res.json(), key=lambda t: t["id"]) == [
        {"id": seed_catalog["book"], "name": "Book", "checkoutDays": 14},
        {"id": seed_catalog["periodical"], "name": "Periodical", "checkoutDays": 7},
    ]


async def test_genres_listing(client, seed_catalog):
    res = await client.get("/api/genres")
    assert res.status_code == 200
    assert {g["name"] for g in res.json()} == {"Science Fiction", "Mystery"}
    assert all(set(g) == {"id", "name"} for g in res.json())


async def test_empty_catalog_lists_are_empty(client):
    for path in ("/api/materialTypes", "/api/genres", "/api/patrons", "/api/materials"):
        res = await client.get(path)
        assert res.status_code == 200
        assert res.json() == []


async def test_patrons_include_inactive(client, seed_catalog):
    res = await client.get("/api/patrons")
    assert res.status_code == 200
    by_id = {p["id"]: p for p in res.json()}
    assert set(by_id) == {seed_catalog["ada"], seed_catalog["bo"]}
    assert by_id[seed_catalog["bo"]]["isActive"] is False


async def test_patrons_include_returned_and_outstanding_checkouts(client, seed_catalog):
    res = await client.get("/api/patrons")
    ada = next(p for p in res.json() if p["id"] == seed_catalog["ada"])
    checkouts = {c["id"]: c for c in ada["checkouts"]}
    assert set(checkouts) == {
        seed_catalog["returned_checkout"], seed_catalog["outstanding_checkout"],
    }
    assert checkouts[seed_catalog["returned_checkout"]]["returnDate"] is not None
    assert checkouts[seed_catalog["outstanding_checkout"]]["returnDate"] is None


async def test_patron_checkout_nests_material_type_and_genre(client, seed_catalog):
    res = await client.get("/api/patrons")
    ada = next(p for p in res.json() if p["id"] == seed_catalog["ada"])
    checkout = next(
        c for c in ada["checkouts"] if c["id"] == seed_catalog["outstanding_checkout"]
    )
    material = checkout["material"]
    assert checkout["materialId"] == seed_catalog["hound"]
    assert checkout["patronId"] == seed_catalog["ada"]
    assert material["materialName"] == "The Hound of the Baskervilles"
    assert material["materialType"]["checkoutDays"] == 14
    assert material["genre"]["name"] == "Mystery"
    assert "patron" not in checkout


async def test_patron_listing_keeps_withdrawn_materials_in_history(client, seed_catalog):
    res = await client.get("/api/patrons")
    bo = next(p for p in res.json() if p["id"] == seed_catalog["bo"])
    material = bo["checkouts"][0]["material"]
    assert material["id"] == seed_catalog["withdrawn"]
    assert material["outOfCirculationSince"] is not None
