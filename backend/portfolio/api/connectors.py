from fastapi import APIRouter

from core import config
from portfolio.connectors.engine import compute_paths
from portfolio.connectors.geometry import Point, Rect
from portfolio.connectors.layout import StaticLayout
from portfolio.schemas import ConnectorRequest

router = APIRouter()


@router.post("/connectors")
def connectors(req: ConnectorRequest):
    layout = StaticLayout(
        skills={name: Rect(r.left, r.top, r.width, r.height) for name, r in req.skills.items()},
        experiences={exp_id: Rect(r.left, r.top, r.width, r.height) for exp_id, r in req.experiences.items()},
        scroll=Point(req.scroll.x, req.scroll.y),
    )
    style = req.style or config.CONNECTOR_STYLE
    paths = compute_paths(req.active_skills, layout, style=style)
    return {
        "style": style,
        "paths": [path.to_dict() for path in paths],
    }
