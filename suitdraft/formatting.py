"""
Display formatting for dates, money, addresses and party descriptions.
"""

from .models import AreaUnit, Parentage

BLANK = "________"

PARENTAGE_ABBREVIATIONS = {
    Parentage.SON_OF: "S/o",
    Parentage.DAUGHTER_OF: "D/o",
    Parentage.WIFE_OF: "W/o",
    Parentage.HUSBAND_OF: "H/o",
    Parentage.OTHER: "C/o",
}

AREA_UNIT_NAMES = {
    AreaUnit.CENT: ("Cent", "Cents"),
    AreaUnit.ACRE: ("Acre", "Acres"),
    AreaUnit.SQFT: ("Sq. Ft.", "Sq. Ft."),
    AreaUnit.SQM: ("Sq. M.", "Sq. M."),
}


def ordinal(day):
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def long_date(d):
    """19 Oct 2026 -> '19th day of October, 2026'."""
    return f"{ordinal(d.day)} day of {d.strftime('%B')}, {d.year}"


def short_date(d):
    if d is None:
        return ""
    return d.strftime("%d.%m.%Y")


def _indian_grouping(whole):
    digits = str(whole)
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def rupees(amount):
    """125000 -> 'Rs. 1,25,000.00'."""
    if amount is None:
        return f"Rs. {BLANK}"
    sign = "-" if amount < 0 else ""
    paise_total = int(round(abs(amount) * 100))
    whole, paise = divmod(paise_total, 100)
    return f"Rs. {sign}{_indian_grouping(whole)}.{paise:02d}"


def case_number_line(basic):
    number = basic.case_number or BLANK
    return f"{basic.case_type} No. {number} of {basic.year}"


def address_text(address):
    parts = [address.building, address.street, address.locality, address.district, address.state]
    text = ", ".join(part.strip() for part in parts if part and part.strip())
    if address.pincode:
        text = f"{text} - {address.pincode}" if text else address.pincode
    return text


def parentage_text(party):
    abbreviation = PARENTAGE_ABBREVIATIONS.get(party.parentage_type, "C/o")
    return f"{abbreviation} {party.parent_name}"


def party_description(party):
    """
    'Ravi Kumar, aged 45 years, S/o Krishnan Nair, Farmer, residing at
    Thekkedath House, ..., Kerala - 682011'
    """
    return (
        f"{party.name}, aged {party.age} years, {parentage_text(party)}, "
        f"{party.occupation}, residing at {address_text(party.address)}"
    )


def area_text(measurements):
    if measurements is None:
        return ""
    area = measurements.area
    shown = f"{area:g}"
    singular, plural = AREA_UNIT_NAMES.get(measurements.unit, (measurements.unit, measurements.unit))
    return f"{shown} {singular if area == 1 else plural}"
