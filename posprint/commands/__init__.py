"""
ESC/POS commands for Bixolon SRP-350plus compatible thermal printers.

Every command is a frozen dataclass with an ``encode()`` method returning
the literal protocol bytes. Parameters are validated at construction.

Module Structure:
    commands/
    ├── __init__.py          # This file (public API exports)
    ├── base.py              # Command protocol, control bytes, helpers
    ├── basic.py             # LF, FF, CR, HT, feeds, raw text
    ├── printer_control.py   # Initialize, drawer pulses, cancel, buttons
    ├── paper.py             # Paper cut
    ├── character.py         # Emphasis, underline, size, alignment, ...
    ├── codepage.py          # Code pages, international sets
    ├── spacing.py           # Line spacing, tabs, positions, margins
    ├── page_mode.py         # Page mode, print area, direction
    ├── barcode.py           # 1D barcodes
    ├── symbol.py            # QR Code, PDF417
    ├── image.py             # Bit image, raster image, downloaded image
    ├── macro.py             # Macro definition and execution
    └── status.py            # Real-time status, ASB

Usage:
    >>> from posprint.commands import SetEmphasized, encode_all
    >>> encode_all([SetEmphasized(True), SetEmphasized(False)])
    b'\\x1bE\\x01\\x1bE\\x00'
"""

from posprint.commands.barcode import (
    DEFAULT_BARCODE_HEIGHT,
    BarcodeSystem,
    BarcodeWidth,
    HriFont,
    HriPosition,
    PrintBarcode,
    SetBarcodeHeight,
    SetBarcodeWidth,
    SetHriFont,
    SetHriPosition,
)
from posprint.commands.base import (
    CAN,
    CR,
    DC4,
    DLE,
    EOT,
    ESC,
    FF,
    FS,
    GS,
    HT,
    LF,
    Command,
    QueryCommand,
    check_range,
    encode_all,
    raw_bytes,
    u16_le,
    u8,
)
from posprint.commands.basic import (
    CarriageReturn,
    FeedLines,
    FormFeed,
    HorizontalTab,
    LineFeed,
    PrintAndFeed,
    PrintText,
)
from posprint.commands.character import (
    CharacterSize,
    Font,
    Justification,
    RotationMode,
    ScaleFactor,
    SelectFont,
    SetCharacterSize,
    SetDoubleStrike,
    SetEmphasized,
    SetJustification,
    SetReverse,
    SetRotation,
    SetSmoothing,
    SetUnderline,
    SetUpsideDown,
    UnderlineThickness,
)
from posprint.commands.codepage import (
    CodePage,
    InternationalCharacterSet,
    SelectCharacterSet,
    SelectCodePage,
)
from posprint.commands.image import (
    BitImageMode,
    DefineDownloadedImage,
    DownloadedImageMode,
    PrintDownloadedImage,
    PrintRasterImage,
    RasterImageMode,
    SelectBitImageMode,
)
from posprint.commands.macro import (
    ExecuteMacro,
    MacroExecutionMode,
    ToggleMacroDefinition,
)
from posprint.commands.page_mode import (
    EnterPageMode,
    ExitPageMode,
    PrintArea,
    PrintDirection,
    SetHorizontalPosition,
    SetPrintArea,
    SetPrintDirection,
    SetVerticalPosition,
)
from posprint.commands.paper import CutMode, CutPaper
from posprint.commands.printer_control import (
    CancelPrintData,
    DrawerPin,
    GeneratePulse,
    GenerateRealtimePulse,
    Initialize,
    SetPanelButtons,
)
from posprint.commands.spacing import (
    SetAbsolutePosition,
    SetDefaultLineSpacing,
    SetHorizontalTabs,
    SetLeftMargin,
    SetLineSpacing,
    SetPrintingWidth,
    SetRelativePosition,
    SetRightSpacing,
)
from posprint.commands.status import (
    AsbFlags,
    EnableAsb,
    ErrorStatus,
    OfflineStatus,
    PaperRollStatus,
    PrinterStatus,
    StatusResponse,
    StatusType,
    TransmitStatus,
)
from posprint.commands.symbol import (
    Pdf417Columns,
    Pdf417ErrorCorrection,
    Pdf417Rows,
    PrintPdf417,
    PrintQrCode,
    QrErrorCorrection,
    QrModel,
)

__all__ = [
    # base
    "ESC",
    "GS",
    "FS",
    "DLE",
    "EOT",
    "DC4",
    "LF",
    "FF",
    "CR",
    "HT",
    "CAN",
    "Command",
    "QueryCommand",
    "check_range",
    "u8",
    "u16_le",
    "encode_all",
    "raw_bytes",
    # basic
    "LineFeed",
    "FormFeed",
    "CarriageReturn",
    "HorizontalTab",
    "PrintAndFeed",
    "FeedLines",
    "PrintText",
    # printer control
    "DrawerPin",
    "Initialize",
    "GeneratePulse",
    "GenerateRealtimePulse",
    "CancelPrintData",
    "SetPanelButtons",
    # paper
    "CutMode",
    "CutPaper",
    # character
    "UnderlineThickness",
    "Font",
    "ScaleFactor",
    "CharacterSize",
    "Justification",
    "RotationMode",
    "SetEmphasized",
    "SetUnderline",
    "SetDoubleStrike",
    "SelectFont",
    "SetCharacterSize",
    "SetJustification",
    "SetUpsideDown",
    "SetRotation",
    "SetReverse",
    "SetSmoothing",
    # code page
    "CodePage",
    "InternationalCharacterSet",
    "SelectCodePage",
    "SelectCharacterSet",
    # spacing
    "SetDefaultLineSpacing",
    "SetLineSpacing",
    "SetRightSpacing",
    "SetHorizontalTabs",
    "SetAbsolutePosition",
    "SetRelativePosition",
    "SetLeftMargin",
    "SetPrintingWidth",
    # page mode
    "PrintDirection",
    "PrintArea",
    "EnterPageMode",
    "ExitPageMode",
    "SetPrintDirection",
    "SetPrintArea",
    "SetHorizontalPosition",
    "SetVerticalPosition",
    # barcode
    "DEFAULT_BARCODE_HEIGHT",
    "BarcodeWidth",
    "HriPosition",
    "HriFont",
    "BarcodeSystem",
    "SetBarcodeHeight",
    "SetBarcodeWidth",
    "SetHriPosition",
    "SetHriFont",
    "PrintBarcode",
    # symbol
    "QrModel",
    "QrErrorCorrection",
    "PrintQrCode",
    "Pdf417Columns",
    "Pdf417Rows",
    "Pdf417ErrorCorrection",
    "PrintPdf417",
    # image
    "BitImageMode",
    "RasterImageMode",
    "DownloadedImageMode",
    "SelectBitImageMode",
    "PrintRasterImage",
    "DefineDownloadedImage",
    "PrintDownloadedImage",
    # macro
    "MacroExecutionMode",
    "ToggleMacroDefinition",
    "ExecuteMacro",
    # status
    "StatusType",
    "PrinterStatus",
    "OfflineStatus",
    "ErrorStatus",
    "PaperRollStatus",
    "StatusResponse",
    "TransmitStatus",
    "AsbFlags",
    "EnableAsb",
]
