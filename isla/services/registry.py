"""Catalog of the icons Isla knows how to draw."""

from types import MappingProxyType
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IconSpec(BaseModel):
    """Geometry switches for one catalog icon."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(gt=0)
    maskable: bool = False
    apple: bool = False


ICON_SPECS = MappingProxyType({
    'ck-wallet-icon-192.v1.png': IconSpec(size=192, maskable=False, apple=False),
    'ck-wallet-icon-512.v1.png': IconSpec(size=512, maskable=False, apple=False),
    'ck-wallet-icon-maskable-512.v1.png': IconSpec(size=512, maskable=True, apple=False),
    'ck-wallet-apple-touch-152.v1.png': IconSpec(size=152, maskable=False, apple=True),
    'ck-wallet-apple-touch-180.v1.png': IconSpec(size=180, maskable=False, apple=True),
})


def known_icon(name: str) -> bool:
    return name in ICON_SPECS


def list_icon_names() -> List[str]:
    """All catalog names, in catalog order."""
    return list(ICON_SPECS.keys())


def get_icon_spec(name: str) -> Optional[IconSpec]:
    return ICON_SPECS.get(name)


def icon_purpose(spec: IconSpec) -> str:
    """Web manifest `purpose` value for an icon."""
    return 'maskable' if spec.maskable else 'any'
