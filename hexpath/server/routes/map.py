"""
Purpose: Map editing and path queries over HTTP.
Dependencies: core/session.py, core/hex/utils.py, core/pathfinding/a_star.py, flask.
Ext Hooks: Several sessions keyed by map id.
Server Only: All state lives in the app's MapSession.
"""

from flask import Blueprint, current_app, jsonify, request
import structlog

from hexpath.core.config import MAX_RADIUS, MIN_RADIUS
from hexpath.core.hex.utils import get_neighbors, parse_hex
from hexpath.core.map.terrain import lookup_terrain
from hexpath.core.pathfinding.a_star import a_star

logger = structlog.get_logger()

bp = Blueprint('map', __name__)


class BadRequest(ValueError):
    pass


def _session():
    return current_app.config["MAP_SESSION"]


def _body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Expected a JSON object body")
    return data


def _coord(data, key):
    if key not in data:
        raise BadRequest(f"Missing '{key}'")
    try:
        return parse_hex(data[key])
    except ValueError as e:
        raise BadRequest(str(e)) from None


def _tile_payload(pos, tile):
    payload = pos.to_dict()
    payload.update(tile.to_dict())
    return payload


def _cost_payload(cost):
    # JSON has no infinity
    return None if cost == float('inf') else cost


@bp.errorhandler(BadRequest)
def handle_bad_request(e):
    logger.info("Rejected request", path=request.path, error=str(e))
    return jsonify({"error": str(e)}), 400


@bp.route("/api/map", methods=["GET"])
def get_map():
    return jsonify(_session().to_dict())


@bp.route("/api/map/generate", methods=["POST"])
def generate_map():
    data = request.get_json(silent=True) or {}
    radius = data.get("radius") if isinstance(data, dict) else None
    if radius is not None and (isinstance(radius, bool) or not isinstance(radius, int)
                               or not MIN_RADIUS <= radius <= MAX_RADIUS):
        raise BadRequest(f"radius must be an integer between {MIN_RADIUS} and {MAX_RADIUS}")
    session = _session()
    session.regenerate(radius)
    logger.info("Map generated", radius=session.radius)
    return jsonify(session.to_dict())


@bp.route("/api/map/resize", methods=["POST"])
def resize_map():
    data = _body()
    delta = data.get("delta")
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise BadRequest("delta must be an integer")
    session = _session()
    changed = session.resize(delta)
    payload = session.to_dict()
    payload["changed"] = changed
    return jsonify(payload)


@bp.route("/api/map/proposals", methods=["POST"])
def merge_proposals():
    data = _body()
    proposals = data.get("proposals")
    if not isinstance(proposals, list):
        raise BadRequest("proposals must be a list")
    session = _session()
    session.apply_proposals(proposals)
    return jsonify(session.to_dict())


@bp.route("/api/tiles/<key>", methods=["GET"])
def get_tile(key):
    session = _session()
    try:
        pos = parse_hex(key)
    except ValueError as e:
        raise BadRequest(str(e)) from None
    tile = session.grid.get(pos)
    if tile is None:
        return jsonify({"error": "Tile not found"}), 404
    payload = _tile_payload(pos, tile)
    payload["roadNeighbors"] = session.grid.road_neighbors(pos)
    return jsonify(payload)


@bp.route("/api/tiles/terrain", methods=["POST"])
def set_terrain():
    data = _body()
    pos = _coord(data, "coord")
    if "terrain" not in data:
        raise BadRequest("Missing 'terrain'")
    try:
        terrain = lookup_terrain(data["terrain"])
    except ValueError as e:
        raise BadRequest(str(e)) from None
    session = _session()
    if not session.paint(pos, terrain):
        return jsonify({"error": "Tile not found"}), 404
    return jsonify(_tile_payload(pos, session.grid.get(pos)))


@bp.route("/api/tiles/road", methods=["POST"])
def toggle_road():
    data = _body()
    pos = _coord(data, "coord")
    session = _session()
    if not session.toggle_road(pos):
        return jsonify({"error": "Tile not found"}), 404
    return jsonify(_tile_payload(pos, session.grid.get(pos)))


@bp.route("/api/neighbors/<key>", methods=["GET"])
def neighbors(key):
    try:
        pos = parse_hex(key)
    except ValueError as e:
        raise BadRequest(str(e)) from None
    return jsonify({"neighbors": [n.to_dict() for n in get_neighbors(pos)]})


@bp.route("/api/move_path", methods=["POST"])
def handle_move_path():
    data = _body()
    session = _session()
    goal = _coord(data, "goal")
    start = _coord(data, "start") if "start" in data else session.player_pos

    path = a_star(start, goal, session.grid)
    if not path:
        return jsonify({"error": "No valid path", "path": [], "cost": 0}), 200

    return jsonify({
        "path": [p.to_dict() for p in path],
        "cost": _cost_payload(session.path_cost(path)),
    })


@bp.route("/api/move", methods=["POST"])
def move():
    data = _body()
    session = _session()
    path = session.move_to(_coord(data, "goal"))
    payload = {
        "path": [p.to_dict() for p in path],
        "playerPos": session.player_pos.to_dict(),
    }
    if not path:
        payload["error"] = "No valid path"
    return jsonify(payload)
