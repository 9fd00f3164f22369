from .schematic import (
    FoldSpec,
    GEAR_RATIOS,
    NumberToken,
    PART_NUMBERS,
    Schematic,
    adjacent_numbers,
    is_gear,
    is_symbol,
    part_1,
    part_2,
    scan_number,
    total_for,
)
