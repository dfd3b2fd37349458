import unittest
from hexpath.core.config import MAX_RADIUS, MIN_RADIUS, ROAD_COST
from hexpath.core.session import MapSession
from hexpath.server.app import create_app


class TestMapRoutes(unittest.TestCase):
    def setUp(self):
        self.session = MapSession(radius=2)
        self.app = create_app(self.session)
        self.client = self.app.test_client()

    def test_get_map(self):
        response = self.client.get("/api/map")
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["radius"], 2)
        self.assertEqual(len(data["tiles"]), 19)
        self.assertEqual(data["tiles"]["1,-1"]["terrain"], "PLAINS")

    def test_generate(self):
        data = self.client.post("/api/map/generate", json={"radius": 4}).get_json()
        self.assertEqual(data["radius"], 4)
        self.assertEqual(len(data["tiles"]), 61)
        self.assertIs(self.app.config["MAP_SESSION"], self.session)

    def test_generate_rejects_bad_radius(self):
        response = self.client.post("/api/map/generate", json={"radius": -2})
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())

    def test_generate_rejects_radius_out_of_bounds(self):
        for radius in [MAX_RADIUS + 1, MIN_RADIUS - 1, 100000]:
            response = self.client.post("/api/map/generate", json={"radius": radius})
            self.assertEqual(response.status_code, 400)
        self.assertEqual(self.session.radius, 2)
        self.assertEqual(len(self.session.grid), 19)

    def test_generate_accepts_max_radius(self):
        data = self.client.post("/api/map/generate", json={"radius": MAX_RADIUS}).get_json()
        self.assertEqual(data["radius"], MAX_RADIUS)

    def test_resize(self):
        data = self.client.post("/api/map/resize", json={"delta": 1}).get_json()
        self.assertTrue(data["changed"])
        self.assertEqual(data["radius"], 3)
        data = self.client.post("/api/map/resize", json={"delta": -5}).get_json()
        self.assertEqual(data["radius"], 2)
        data = self.client.post("/api/map/resize", json={"delta": -1}).get_json()
        self.assertFalse(data["changed"])

    def test_move_path(self):
        response = self.client.post("/api/move_path", json={"start": [0, 0], "goal": [2, 0]})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual([(p["q"], p["r"]) for p in data["path"]], [(0, 0), (1, 0), (2, 0)])
        self.assertEqual(data["cost"], 2)

    def test_move_path_defaults_to_player_position(self):
        data = self.client.post("/api/move_path", json={"goal": "0,2"}).get_json()
        self.assertEqual((data["path"][0]["q"], data["path"][0]["r"]), (0, 0))
        self.assertEqual(len(data["path"]), 3)

    def test_move_path_no_path(self):
        self.client.post("/api/tiles/terrain", json={"coord": "2,0", "terrain": "WALL"})
        response = self.client.post("/api/move_path", json={"start": [0, 0], "goal": [2, 0]})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"error": "No valid path", "path": [], "cost": 0})

    def test_move_path_invalid(self):
        self.assertEqual(self.client.post("/api/move_path", json={"start": [0, 0]}).status_code, 400)
        self.assertEqual(self.client.post("/api/move_path", json={"goal": "x"}).status_code, 400)
        self.assertEqual(self.client.post("/api/move_path", data="not json").status_code, 400)

    def test_set_terrain_and_toggle_road(self):
        data = self.client.post("/api/tiles/terrain", json={"coord": {"q": 1, "r": 0}, "terrain": "FOREST"}).get_json()
        self.assertEqual(data["cost"], 2)
        data = self.client.post("/api/tiles/road", json={"coord": [1, 0]}).get_json()
        self.assertEqual(data["cost"], ROAD_COST)
        self.assertTrue(data["hasRoad"])
        self.assertTrue(self.session.grid.get((1, 0)).has_road)

    def test_set_terrain_rejects_unknown_name(self):
        self.client.post("/api/tiles/terrain", json={"coord": "1,0", "terrain": "MOUNTAIN"})
        response = self.client.post("/api/tiles/terrain", json={"coord": "1,0", "terrain": "MOUNTIAN"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())
        self.assertEqual(self.session.grid.get((1, 0)).terrain.value, "MOUNTAIN")

    def test_set_terrain_requires_terrain(self):
        self.client.post("/api/tiles/terrain", json={"coord": "1,0", "terrain": "SAND"})
        for body in [{"coord": "1,0"}, {"coord": "1,0", "terrain": None}, {"coord": "1,0", "terrain": 3}]:
            self.assertEqual(self.client.post("/api/tiles/terrain", json=body).status_code, 400)
        self.assertEqual(self.session.grid.get((1, 0)).terrain.value, "SAND")

    def test_set_terrain_is_case_insensitive(self):
        data = self.client.post("/api/tiles/terrain", json={"coord": "1,0", "terrain": "dense_forest"}).get_json()
        self.assertEqual(data["terrain"], "DENSE_FOREST")
        self.assertEqual(data["cost"], 3)

    def test_edit_outside_map(self):
        response = self.client.post("/api/tiles/road", json={"coord": [7, 7]})
        self.assertEqual(response.status_code, 404)
        response = self.client.post("/api/tiles/terrain", json={"coord": [7, 7], "terrain": "WALL"})
        self.assertEqual(response.status_code, 404)

    def test_get_tile(self):
        self.client.post("/api/tiles/road", json={"coord": "1,0"})
        data = self.client.get("/api/tiles/0,0").get_json()
        self.assertEqual(data["terrain"], "PLAINS")
        self.assertEqual(data["roadNeighbors"], [True, False, False, False, False, False])
        self.assertEqual(self.client.get("/api/tiles/5,5").status_code, 404)
        self.assertEqual(self.client.get("/api/tiles/abc").status_code, 400)

    def test_blocked_tile_cost_is_null(self):
        data = self.client.post("/api/tiles/terrain", json={"coord": "1,1", "terrain": "WATER"}).get_json()
        self.assertIsNone(data["cost"])
        self.assertTrue(data["blocked"])

    def test_neighbors(self):
        data = self.client.get("/api/neighbors/0,0").get_json()
        self.assertEqual([(n["q"], n["r"]) for n in data["neighbors"]],
                         [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)])

    def test_proposals(self):
        data = self.client.post("/api/map/proposals", json={"proposals": [
            {"q": 0, "r": 0, "terrain": "WALL"},
            {"q": 1, "r": 0, "terrain": "MOUNTAIN", "hasRoad": True},
            {"q": 99, "r": 0},
            {"oops": True},
        ]}).get_json()
        self.assertEqual(data["tiles"]["0,0"]["terrain"], "PLAINS")
        self.assertEqual(data["tiles"]["1,0"]["cost"], ROAD_COST)
        self.assertEqual(self.client.post("/api/map/proposals", json={"proposals": "no"}).status_code, 400)

    def test_move(self):
        data = self.client.post("/api/move", json={"goal": [0, 2]}).get_json()
        self.assertEqual(data["playerPos"], {"q": 0, "r": 2, "s": -2})
        self.client.post("/api/tiles/terrain", json={"coord": [0, 0], "terrain": "WALL"})
        data = self.client.post("/api/move", json={"goal": [0, 0]}).get_json()
        self.assertEqual(data["path"], [])
        self.assertEqual(data["error"], "No valid path")


if __name__ == '__main__':
    unittest.main()
