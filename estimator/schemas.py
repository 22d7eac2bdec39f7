from pydantic import BaseModel, Field
from typing import Any, Optional, List, Dict, Literal

WallSide = Literal["exterior", "interior"]
WallKind = Literal["partition", "bearing", "shear", "knee"]
ExtraType = Literal["Header", "Post", "Headers infill", "Extra blocking", "Extra sheathing", "Stud"]


class CatalogItem(BaseModel):
    """A resolved, priced SKU handed to the engine by the catalog layer."""
    unit: Optional[str] = None
    base_price: Optional[float] = None
    markup_pct: Optional[float] = None
    price_with_markup: Optional[float] = None
    family_label: str = ""
    size_label: str = ""
    vendor: Optional[str] = None

    class Config:
        extra = "ignore"


class Row(BaseModel):
    qty_raw: float
    qty_final: int
    unit: str
    unit_price: float
    subtotal: float


class LineRow(Row):
    key: str
    label: str
    waste_pct: float = 0.0
    board_len_ft: Optional[float] = None


class ExtraRow(BaseModel):
    id: str
    type: ExtraType
    item: Optional[CatalogItem] = None
    waste_pct: Optional[float] = None
    inputs: Dict[str, float] = {}
    system: bool = False


class WallGroupIn(BaseModel):
    id: str = "exterior-0"
    side: WallSide = "exterior"
    kind: WallKind = "partition"
    length_lf: float = 0.0
    height_ft: float = 12.0
    stud_spacing_in: float = 16.0
    stud_multiplier: float = 1.0
    waste: Dict[str, float] = {}
    sel: Dict[str, Optional[CatalogItem]] = {}
    extras: List[ExtraRow] = []
    panel_len_ft: Optional[float] = None


class GroupStats(BaseModel):
    id: str
    side: WallSide
    wall_kind: str
    length_lf: float
    is_shear: bool = False
    is_bearing: bool = False
    is_partition: bool = False
    is_knee: bool = False
    panel_sheets: int = 0
    zip_sheets_final: int = 0
    plate_pieces: int = 0
    bottom_plate_pieces_panel: int = 0
    panel_pt_boards: int = 0
    pt_lf: float = 0.0
    bottom_board_len_ft: float = 0.0
    panels: int = 0
    group_subtotal: float = 0.0


class WallGroupOut(BaseModel):
    id: str
    rows: List[LineRow]
    extras: List[LineRow]
    extras_state: List[ExtraRow]
    subtotal: float
    stats: GroupStats


class LooseMaterialsIn(BaseModel):
    sel: Dict[str, Optional[CatalogItem]] = {}
    waste: Dict[str, float] = {}
    include: Dict[str, bool] = {}
    panel_band_lf: Optional[float] = None
    openings_blocking_lf: float = 0.0
    cabinet_blocking_lf: float = 0.0


class SectionIn(BaseModel):
    sel: Dict[str, Optional[CatalogItem]] = {}
    waste: Dict[str, float] = {}


class LevelIn(BaseModel):
    id: str = "level-1"
    name: str = "Level 1"
    exterior_sections: List[WallGroupIn] = []
    interior_sections: List[WallGroupIn] = []
    loose_materials: LooseMaterialsIn = Field(default_factory=LooseMaterialsIn)
    panel_nails: SectionIn = Field(default_factory=SectionIn)


class ManufactureIn(BaseModel):
    rates: Dict[str, float] = {}
    panel_len_ft: Dict[str, float] = {}
    quantities: Dict[str, float] = {}


class ProjectIn(BaseModel):
    name: str = ""
    levels: List[LevelIn] = []
    nails_and_bracing: SectionIn = Field(default_factory=SectionIn)
    manufacture: ManufactureIn = Field(default_factory=ManufactureIn)
    panel_len_ft: Optional[float] = None


class ProjectStats(BaseModel):
    total_exterior_lf: float
    total_interior_shear_lf: float
    total_interior_bearing_lf: float
    total_interior_partition_lf: float
    total_knee_wall_lf: float
    panels_all: int
    plate_pieces_all: int
    pt_pieces_all: int
    sheets_ext_all: int
    sheets_band_all: int
    sheets_extra_all: int
    levels_count: int


class EstimateOut(BaseModel):
    name: str = ""
    levels: List[dict]
    stats: ProjectStats
    nails_and_bracing: dict
    manufacture: dict
    levels_total: float
    grand_total: float


class ExtraChangeIn(BaseModel):
    group: WallGroupIn
    action: Literal["add", "update", "remove"]
    extra_type: Optional[ExtraType] = None
    extra_id: Optional[str] = None
    item: Optional[CatalogItem] = None
    inputs: Dict[str, float] = {}
    waste_pct: Optional[float] = None
    patch: Dict[str, Any] = {}
