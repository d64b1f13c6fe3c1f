class ExternalFiles:
    IMAGE_FILE = "sprite.png"
    PALETTE_FILE = "palette.pal"
    SPRITEINFO_FILE = "spriteinfo.xml"


class XmlRoot:
    SPRPROPS = "SpriteProperties"


class XmlProp:
    OFFSETX = "OffsetX"
    OFFSETY = "OffsetY"
    PACKED = "Packed"


class JascPalette:
    MAGIC = "JASC-PAL"
    VERSION = "0100"
    MAX_COLORS = 256
