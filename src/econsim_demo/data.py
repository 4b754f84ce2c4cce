"""Demo bank catalog.

Identifiers follow the shape of FFIEC RSSD ids and FDIC certificate numbers.
Asset figures are rounded and for demonstration purposes only.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class DemoBank:
    """Definition of one catalog entry, keyed by RSSD id."""

    rssd_id: str
    fdic_certificate_number: str
    bank_name: str
    city: str
    state: str
    total_assets: Decimal
    charter_type: str
    regulator: str
    is_active: bool = True


NATIONAL_BANK = "National Bank"
STATE_MEMBER_BANK = "State Member Bank"
STATE_NONMEMBER_BANK = "State Nonmember Bank"
SAVINGS_ASSOCIATION = "Savings Association"

DEMO_FILING_DATE = date(2024, 3, 31)

# =============================================================================
# Large institutions
# =============================================================================

_LARGE_BANKS: list[DemoBank] = [
    DemoBank(
        rssd_id="852218",
        fdic_certificate_number="628",
        bank_name="JPMorgan Chase Bank, National Association",
        city="Columbus",
        state="OH",
        total_assets=Decimal("3500000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="480228",
        fdic_certificate_number="3510",
        bank_name="Bank of America, National Association",
        city="Charlotte",
        state="NC",
        total_assets=Decimal("2540000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="451965",
        fdic_certificate_number="3511",
        bank_name="Wells Fargo Bank, National Association",
        city="Sioux Falls",
        state="SD",
        total_assets=Decimal("1720000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="476810",
        fdic_certificate_number="7213",
        bank_name="Citibank, N.A.",
        city="Sioux Falls",
        state="SD",
        total_assets=Decimal("1700000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="504713",
        fdic_certificate_number="6548",
        bank_name="U.S. Bank National Association",
        city="Cincinnati",
        state="OH",
        total_assets=Decimal("670000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="817824",
        fdic_certificate_number="6384",
        bank_name="PNC Bank, National Association",
        city="Wilmington",
        state="DE",
        total_assets=Decimal("550000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="852320",
        fdic_certificate_number="9846",
        bank_name="Truist Bank",
        city="Charlotte",
        state="NC",
        total_assets=Decimal("520000000000.00"),
        charter_type=STATE_MEMBER_BANK,
        regulator="FRB",
    ),
    DemoBank(
        rssd_id="2182786",
        fdic_certificate_number="33124",
        bank_name="Goldman Sachs Bank USA",
        city="New York",
        state="NY",
        total_assets=Decimal("500000000000.00"),
        charter_type=STATE_MEMBER_BANK,
        regulator="FRB",
    ),
    DemoBank(
        rssd_id="112837",
        fdic_certificate_number="4297",
        bank_name="Capital One, National Association",
        city="McLean",
        state="VA",
        total_assets=Decimal("470000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="497404",
        fdic_certificate_number="18409",
        bank_name="TD Bank, N.A.",
        city="Wilmington",
        state="DE",
        total_assets=Decimal("370000000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
]

# =============================================================================
# Regional and community institutions (fictional)
# =============================================================================

_REGIONAL_BANKS: list[DemoBank] = [
    DemoBank(
        rssd_id="9100001",
        fdic_certificate_number="91001",
        bank_name="Hudson Valley Savings Bank",
        city="Poughkeepsie",
        state="NY",
        total_assets=Decimal("1500000000.00"),
        charter_type=SAVINGS_ASSOCIATION,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="9100002",
        fdic_certificate_number="91002",
        bank_name="Empire Community Bank",
        city="Albany",
        state="NY",
        total_assets=Decimal("420000000.00"),
        charter_type=STATE_NONMEMBER_BANK,
        regulator="FDIC",
    ),
    DemoBank(
        rssd_id="9100003",
        fdic_certificate_number="91003",
        bank_name="Lone Star Farmers Bank",
        city="Amarillo",
        state="TX",
        total_assets=Decimal("2500000000.00"),
        charter_type=STATE_NONMEMBER_BANK,
        regulator="FDIC",
    ),
    DemoBank(
        rssd_id="9100004",
        fdic_certificate_number="91004",
        bank_name="Pacific Coast Commerce Bank",
        city="San Diego",
        state="CA",
        total_assets=Decimal("8700000000.00"),
        charter_type=STATE_MEMBER_BANK,
        regulator="FRB",
    ),
    DemoBank(
        rssd_id="9100005",
        fdic_certificate_number="91005",
        bank_name="Great Lakes National Bank",
        city="Cleveland",
        state="OH",
        total_assets=Decimal("12300000000.00"),
        charter_type=NATIONAL_BANK,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="9100006",
        fdic_certificate_number="91006",
        bank_name="Prairie State Bank & Trust",
        city="Springfield",
        state="IL",
        total_assets=Decimal("950000000.00"),
        charter_type=STATE_NONMEMBER_BANK,
        regulator="FDIC",
    ),
    DemoBank(
        rssd_id="9100007",
        fdic_certificate_number="91007",
        bank_name="Rocky Mountain Thrift",
        city="Denver",
        state="CO",
        total_assets=Decimal("310000000.00"),
        charter_type=SAVINGS_ASSOCIATION,
        regulator="OCC",
    ),
    DemoBank(
        rssd_id="9100008",
        fdic_certificate_number="91008",
        bank_name="Bayou Merchants Bank",
        city="Baton Rouge",
        state="LA",
        total_assets=Decimal("640000000.00"),
        charter_type=STATE_MEMBER_BANK,
        regulator="FRB",
    ),
    # Closed institution: stays in the catalog but never shows up in search.
    DemoBank(
        rssd_id="9100009",
        fdic_certificate_number="91009",
        bank_name="Old Harbor Savings",
        city="Boston",
        state="MA",
        total_assets=Decimal("180000000.00"),
        charter_type=SAVINGS_ASSOCIATION,
        regulator="OCC",
        is_active=False,
    ),
]

DEMO_BANKS: list[DemoBank] = _LARGE_BANKS + _REGIONAL_BANKS
