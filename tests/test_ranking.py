from scdemo_api.app.services.ranking_service import RANKING_KEY, RankingService


async def test_ranking_service_orders_by_score(fake_redis):
    await RankingService.add_score("alice", 10)
    await RankingService.add_score("bob", 30)
    await RankingService.add_score("carol", 20)

    assert await RankingService.get_rank("bob") == 0
    assert await RankingService.get_rank("alice") == 2
    assert await RankingService.get_score("carol") == 20.0
    assert await RankingService.get_rank_count() == 3
    assert await RankingService.get_top(2) == [("bob", 30.0), ("carol", 20.0)]


async def test_ranking_service_missing_member(fake_redis):
    assert await RankingService.get_rank("nobody") is None
    assert await RankingService.get_score("nobody") is None
    assert await RankingService.get_top(0) == []


async def test_ranking_service_update_and_remove(fake_redis):
    await RankingService.add_score("alice", 10)
    await RankingService.add_score("bob", 5)
    await RankingService.add_score("bob", 50)

    assert await RankingService.get_rank("bob") == 0
    assert await RankingService.get_rank_count() == 2

    await RankingService.remove("bob")
    assert await RankingService.get_rank("bob") is None

    await RankingService.remove_all()
    assert await RankingService.get_rank_count() == 0
    assert RANKING_KEY not in fake_redis.sorted_sets


def test_ranking_api(client):
    response = client.post("/api/ranking", json={"member": "alice", "score": 10})
    assert response.status_code == 201
    assert response.json() == {"payload": {"member": "alice", "score": 10.0, "rank": 0}}

    client.post("/api/ranking", json={"member": "bob", "score": 20})

    top = client.get("/api/ranking", params={"limit": 5}).json()["payload"]
    assert [entry["member"] for entry in top] == ["bob", "alice"]
    assert [entry["rank"] for entry in top] == [0, 1]

    assert client.get("/api/ranking/count").json() == {"payload": {"count": 2}}
    assert client.get("/api/ranking/members/alice").json()["payload"]["rank"] == 1


def test_ranking_api_unknown_member(client):
    response = client.get("/api/ranking/members/ghost")

    assert response.status_code == 404
    assert response.json()["detail"] == "Member not ranked"


def test_ranking_api_delete(client):
    client.post("/api/ranking", json={"member": "alice", "score": 10})
    client.post("/api/ranking", json={"member": "bob", "score": 20})

    assert client.delete("/api/ranking/members/alice").status_code == 204
    assert client.get("/api/ranking/count").json()["payload"]["count"] == 1

    assert client.delete("/api/ranking").status_code == 204
    assert client.get("/api/ranking/count").json()["payload"]["count"] == 0


def test_ranking_api_validates_input(client):
    assert client.post("/api/ranking", json={"member": "", "score": 1}).status_code == 422
    assert client.get("/api/ranking", params={"limit": 0}).status_code == 422


def test_member_named_count_is_reachable(client):
    client.post("/api/ranking", json={"member": "count", "score": 7})

    assert client.get("/api/ranking/members/count").json()["payload"] == {
        "member": "count",
        "score": 7.0,
        "rank": 0,
    }
    assert client.get("/api/ranking/count").json() == {"payload": {"count": 1}}
