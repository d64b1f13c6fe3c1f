"""
Read and write spriteinfo.xml (sprite offset and art format).
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Tuple

from chaotix_files import Sprite
from data import string_value_to_int, write_xml_file
from .constants import XmlRoot, XmlProp


def write_spriteinfo_xml(sprite: Sprite, output_path: Path, packed: bool = False) -> None:
    """Write spriteinfo.xml with the sprite offset and packed flag."""
    root = ET.Element(XmlRoot.SPRPROPS)

    ET.SubElement(root, XmlProp.OFFSETX).text = str(sprite.x)
    ET.SubElement(root, XmlProp.OFFSETY).text = str(sprite.y)
    ET.SubElement(root, XmlProp.PACKED).text = str(int(packed))

    write_xml_file(root, output_path)


def read_spriteinfo_xml(xml_path: Path) -> Tuple[int, int, bool]:
    """Read spriteinfo.xml.

    Returns:
        Tuple of (offset_x, offset_y, packed). Missing properties read as 0.
    """
    if not xml_path.exists():
        raise FileNotFoundError(f"{xml_path.name} not found.")

    tree = ET.parse(xml_path)
    root = tree.getroot()

    if root.tag != XmlRoot.SPRPROPS:
        raise ValueError(
            f"Invalid {xml_path.name}: root element is <{root.tag}>, "
            f"expected <{XmlRoot.SPRPROPS}>"
        )

    values = {XmlProp.OFFSETX: 0, XmlProp.OFFSETY: 0, XmlProp.PACKED: 0}
    for elem in root:
        if elem.tag in values:
            values[elem.tag] = string_value_to_int(elem.text or "0")

    return values[XmlProp.OFFSETX], values[XmlProp.OFFSETY], values[XmlProp.PACKED] != 0
