"""Record types, field lengths, indicator values and code tables of the FIRE format."""

from types import MappingProxyType


def _pairs(text: str, key=str) -> dict:
    """Read ``code|description`` lines into a dict, keeping their order."""
    table = {}
    for line in text.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        code, _, description = line.partition("|")
        table[key(code)] = description
    return table


def _sections(text: str) -> dict[str, dict[str, str]]:
    """Read ``[name]`` headed blocks of ``code|description`` lines."""
    tables: dict[str, dict[str, str]] = {}
    current: dict[str, str] = {}
    for line in text.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("[") and line.endswith("]"):
            current = tables.setdefault(line[1:-1], {})
            continue
        code, _, description = line.partition("|")
        current[code] = description
    return tables


# Record type identifiers
T_RECORD_TYPE = "T"
A_RECORD_TYPE = "A"
B_RECORD_TYPE = "B"
C_RECORD_TYPE = "C"
K_RECORD_TYPE = "K"
F_RECORD_TYPE = "F"

# Extension block types of the payee "B" record, one per form
SUB_1097_BTC_TYPE = "1097-BTC"
SUB_1098_TYPE = "1098"
SUB_1098_C_TYPE = "1098-C"
SUB_1098_E_TYPE = "1098-E"
SUB_1098_F_TYPE = "1098-F"
SUB_1098_Q_TYPE = "1098-Q"
SUB_1098_T_TYPE = "1098-T"
SUB_1099_A_TYPE = "1099-A"
SUB_1099_B_TYPE = "1099-B"
SUB_1099_C_TYPE = "1099-C"
SUB_1099_CAP_TYPE = "1099-CAP"
SUB_1099_DIV_TYPE = "1099-DIV"
SUB_1099_G_TYPE = "1099-G"
SUB_1099_H_TYPE = "1099-H"
SUB_1099_INT_TYPE = "1099-INT"
SUB_1099_K_TYPE = "1099-K"
SUB_1099_LS_TYPE = "1099-LS"
SUB_1099_LTC_TYPE = "1099-LTC"
SUB_1099_MISC_TYPE = "1099-MISC"
SUB_1099_NEC_TYPE = "1099-NEC"
SUB_1099_OID_TYPE = "1099-OID"
SUB_1099_PATR_TYPE = "1099-PATR"
SUB_1099_Q_TYPE = "1099-Q"
SUB_1099_R_TYPE = "1099-R"
SUB_1099_S_TYPE = "1099-S"
SUB_1099_SA_TYPE = "1099-SA"
SUB_1099_SB_TYPE = "1099-SB"
SUB_3921_TYPE = "3921"
SUB_3922_TYPE = "3922"
SUB_5498_TYPE = "5498"
SUB_5498_ESA_TYPE = "5498ESA"
SUB_5498_SA_TYPE = "5498SA"
SUB_W2G_TYPE = "W2G"

# Lengths
RECORD_LENGTH = 750
SUB_RECORD_LENGTH = 207

BLANK_STRING = " "
ZERO_STRING = "0"
# Dates are written as YYYYMMDD
DATE_FORMAT = "%Y%m%d"

# Indicator values
PRIOR_YEAR_DATA_INDICATOR = "P"
TEST_FILE_INDICATOR = "T"
FOREIGN_ENTITY_INDICATOR = "1"
VENDOR_INDICATOR_PURCHASED = "V"
VENDOR_INDICATOR_PRODUCED = "I"
FS_FILING_PROGRAM_APPROVED = "1"
LAST_FILING_INDICATOR = "1"
TRANSFER_AGENT_INDICATOR = "1"
NOT_TRANSFER_AGENT_INDICATOR = "0"
CORRECTED_RETURN_INDICATOR_G = "G"
CORRECTED_RETURN_INDICATOR_C = "C"
TIN_TYPE_1 = "1"  # EIN
TIN_TYPE_2 = "2"  # SSN, ITIN, ATIN
FOREIGN_COUNTRY_INDICATOR = "1"
SECOND_TIN_NOTICE = "2"
FATCA_FILING_REQUIREMENT_INDICATOR = "1"
DIRECT_SALES_INDICATOR = "1"
PROPERTY_SECURING_MORTGAGE_INDICATOR = "1"
GENERAL_ONE_INDICATOR = "1"
GENERAL_TWO_INDICATOR = "2"

OUTPUT_JSON_FORMAT = "json"
OUTPUT_IRS_FORMAT = "irs"

STATE_ABBREVIATION_CODES = MappingProxyType(_pairs("""
    AL|Alabama
    AK|Alaska
    AS|American Samoa
    AZ|Arizona
    AR|Arkansas
    CA|California
    CO|Colorado
    CT|Connecticut
    DE|Delaware
    DC|District of Columbia
    FL|Florida
    GA|Georgia
    GU|Guam
    HI|Hawaii
    ID|Idaho
    IL|Illinois
    IN|Indiana
    IA|IA
    KS|KS
    KY|Kentucky
    LA|Louisiana
    ME|Maine
    MD|Maryland
    MA|Massachusetts
    MI|Michigan
    MN|Minnesota
    MS|Mississippi
    MO|Missouri
    MT|Montana
    NE|Nebraska
    NV|Nevada
    NH|New Hampshire
    NJ|New Jersey
    NM|New Mexico
    NY|NY
    NC|North Carolina
    ND|North Dakota
    MP|No. Mariana Islands
    OH|Ohio
    OK|Oklahoma
    OR|Oregon
    PA|Pennsylvania
    PR|Puerto Rico
    RI|Rhode Island
    SC|South Carolina
    SD|South Dakota
    TN|Tennessee
    TX|Texas
    UT|Utah
    VT|Vermont
    VA|Virginia
    VI|U.S. Virgin Islands
    WA|Washington
    WV|West Virginia
    WI|Wisconsin
    WY|Wyoming
"""))

# Codes of the states taking part in the Combined Federal/State Filing program
PARTICIPATE_STATE_CODES = MappingProxyType(_pairs("""
    1|Alabama
    4|Arizona
    5|Arkansas
    6|California
    7|Colorado
    8|Connecticut
    10|Delaware
    13|Georgia
    15|Hawaii
    16|Idaho
    18|Indiana
    20|Kansas
    22|Louisiana
    23|Maine
    24|Maryland
    25|Massachusetts
    26|Michigan
    27|Minnesota
    28|Mississippi
    29|Missouri
    30|Montana
    31|Nebraska
    34|New Jersey
    35|New Mexico
    37|North Carolina
    38|North Dakota
    39|Ohio
    40|Ohio
    45|South Carolina
    55|Wisconsin
""", key=int))

TYPE_OF_RETURNS = MappingProxyType(_pairs("""
    BT|1097-BTC
    3|1098
    X|1098-C
    2|1098-E
    FP|1098-F
    QL|1098-Q
    8|1098-T
    4|1099-A
    B|1099-B
    5|1099-C
    P|1099-CAP
    1|1099-DIV
    F|1099-G
    J|1099-H
    6|1099-INT
    MC|1099-K
    LC|1099-LS
    T|1099-LTC
    A|1099-MISC
    NE|1099-NEC
    D|1099-OID
    7|1099-PATR
    Q|1099-Q
    9|1099-R
    S|1099-S
    M|1099-SA
    SB|1099-SB
    N|3921
    Z|3922
    L|5498
    V|5498-ESA
    K|5498-SA
    W|W-2G
"""))

BTC_ISSUER_INDICATOR = MappingProxyType(_pairs("""
    1|Issuer of bond
    2|An entity that received a 2018 Form
"""))

BTC_CODE = MappingProxyType(_pairs("""
    A|Account number
    C|CUSIP number
    O|Unique identification number
"""))

BTC_BOND_TYPE = MappingProxyType(_pairs("""
    101|Clean Renewable Energy Bond
    199|Other
"""))

_amount_codes = _sections("""
    [1097-BTC]
    1|Total Aggregate
    2|January payments
    3|February payments
    4|March payments
    5|April payments
    6|May payments
    7|June payments
    8|July payments
    9|August payments
    A|September payments
    B|October payments
    C|November payments
    D|December payments
    [1098]
    1|Mortgage
    2|Points
    3|Refund
    4|Mortgage Insurance Premium
    5|Blank
    6|Outstanding Mortgage Principal
    [1098-C]
    4|Gross proceeds from sales
    6|Value of goods or services
    [1098-E]
    1|Student loan interest received by the lender
    [1098-F]
    1|Total amount required to be paid
    2|Restitution/remediation amount
    3|Compliance amount
    [1098-Q]
    1|January payments
    2|February payments
    3|March payments
    4|April payments
    5|May payments
    6|June payments
    7|July payments
    8|August payments
    9|September payments
    A|October payments
    B|November payments
    C|December payments
    D|Total premiums
    E|Annuity amount on start date
    F|FMV of QLAC
    [1098-T]
    1|Payments
    3|Payments
    4|Scholarships
    5|Adjustments
    7|Reimbursements
    [1099-A]
    2|Balance of principal outstanding
    4|Fair market value of the property
    [1099-B]
    2|Proceeds
    3|Cost
    4|Federal income tax withheld
    5|Wash Sale Loss Disallowed
    7|Bartering
    9|Profit
    A|Unrealized profit
    B|Unrealized profit
    C|Aggregate profit
    D|Accrued Market Discount
    [1099-C]
    2|Amount of debt discharged
    3|Interest included in Amount Code 2
    7|Fair market value of property
    [1099-CAP]
    2|Aggregate amount received
    [1099-DIV]
    1|Total ordinary dividends
    2|Qualified dividends
    3|Total capital gain distribution
    5|Section 199A Dividends
    6|Unrecaptured Section 1250 gain
    7|Section 1202 gain
    8|Collectibles (28%) rate gain
    9|Nondividend distributions
    A|Federal income tax withheld
    B|Investment expenses
    C|Foreign tax paid
    D|Cash liquidation distributions
    E|Non-cash liquidation distributions
    F|Exempt interest dividends
    G|Specified private activity bond interest dividends
    [1099-G]
    1|Unemployment
    2|State or local income tax
    4|Federal income tax withheld
    5|Reemployment Trade Adjustment
    6|Taxable grants
    7|Agriculture payments
    9|Market gain
    [1099-H]
    1|Gross amount of health insurance advance payments
    2|Gross amount of health insurance payments for January
    3|Gross amount of health insurance payments for February
    4|Gross amount of health insurance payments for March
    5|Gross amount of health insurance payments for April
    6|Gross amount of health insurance payments for May
    7|Gross amount of health insurance payments for June
    8|Gross amount of health insurance payments for July
    9|Gross amount of health insurance payments for August
    A|Gross amount of health insurance payments for September
    B|Gross amount of health insurance payments for October
    C|Gross amount of health insurance payments for November
    D|Gross amount of health insurance payments for December
    [1099-INT]
    1|Interest income not included in Amount Code 3
    2|Early withdrawal penalty
    3|Interest on U.S. Savings Bonds and Treasury obligations
    4|Federal income tax withheld (backup withholding)
    5|Investment expenses
    6|Foreign tax paid
    8|Tax-exempt interest
    9|Specified private activity bond
    A|Market discount
    B|Bond premium
    D|Bond premium on tax exempt bond
    E|Bond premium on Treasury obligation
    [1099-K]
    1|Gross amount of payment card/third party network transactions
    2|Card not present transactions
    4|Federal Income tax withheld
    5|January payments
    6|February payments
    7|March payments
    8|April payments
    9|May payments
    A|June payments
    B|July payments
    C|August payments
    D|September payments
    E|October payments
    F|November payments
    G|December payments
    [1099-LS]
    1|Amount paid to payment recipient
    [1099-LTC]
    1|Gross long-term care benefits paid
    2|Accelerated death benefits paid
    [1099-MISC]
    1|Rents
    2|Royalties
    3|Other income
    4|Federal income tax withheld
    5|Fishing boat proceeds
    6|Medical and health care payments
    7|Nonemployee compensation (NEC)
    8|Substitute payments in lieu of dividends or interest
    A|Crop insurance proceeds
    B|Excess golden parachute payment
    C|Gross proceeds paid to an attorney in connection with legal services
    D|Section 409A deferrals
    E|Section 409A income
    [1099-NEC]
    1|Nonemployee Compensation
    4|Federal Income Tax Withheld
    [1099-OID]
    1|Original issue discount for 2019
    2|Other periodic interest
    3|Early withdrawal penalty
    4|Federal income tax withheld
    5|Bond premium
    6|Original issue discount on U.S.
    7|Investment expenses
    A|Market discount
    B|Acquisition premium
    C|Tax-Exempt OID
    [1099-PATR]
    1|Patronage dividends
    2|Nonpatronage distributions
    3|Per-unit retain allocations
    4|Federal income tax withheld
    5|Redemption of nonqualified notices and retain allocations
    6|Deduction for domestic production activities income
    B|Qualified Payments
    7|Investment credit
    8|Work opportunity credit
    9|Patron’s alternative minimum tax (AMT) adjustment
    A|For filer’s use for pass-through credits and deduction
    [1099-Q]
    1|Gross distribution
    2|Earnings (or loss)
    3|Basis
    [1099-R]
    1|Gross distribution
    2|Taxable amount
    3|Capital gain
    4|Federal income tax withheld
    5|Employee contributions/designated Roth contributions or insurance premiums
    6|Net unrealized appreciation in employer’s securities
    8|Other
    9|Total employee contributions
    A|Traditional IRA/SEP/SIMPLE
    B|Amount allocable to IRR
    [1099-S]
    2|Gross proceeds
    5|Buyer’s part of real estate tax
    [1099-SA]
    1|Gross distribution
    2|Earnings on excess contributions
    4|Fair market value of the account on the date of death
    [1099-SB]
    1|Investment in contract
    2|Surrender amount
    [3921]
    3|Exercise price per share
    4|Fair market value of share on exercise date
    [3922]
    3|Fair market value per share on grant date
    4|Fair market value on exercise date
    5|Exercise price per share
    8|Exercise price per share determined  as if the option was exercised on the date the option was granted
    [5498]
    1|IRA contributions
    2|Rollover contributions
    3|Roth conversion amount
    4|Recharacterized contributions
    5|Fair market value of account
    6|Life insurance cost included in Amount Code 1
    7|FMV of certain specified assets
    8|SEP contributions
    9|SIMPLE contributions
    A|Roth IRA contributions
    B|RMD amount
    C|Postponed Contribution
    D|Repayments
    [5498-ESA]
    1|Coverdell ESA contributions
    2|Rollover contributions
    [5498-SA]
    1|Employee
    2|Total contributions made in 2019
    3|Total HSA
    4|Rollover contributions
    5|Fair market value of HSA
    [W-2G]
    1|Reportable winnings
    2|Federal income tax withheld
    7|Winnings from identical wagers
""")
# The published description carries a trailing space, which the table text cannot hold.
_amount_codes["1099-G"]["5"] = "Reemployment Trade Adjustment "

# Amount codes for each type of return
AMOUNT_CODES = MappingProxyType(_amount_codes)

# Payment codes of positions 544-750 for form 1098-F
PAYMENT_CODES_1098F = MappingProxyType(_pairs("""
    B|Multiple payers/defendants
    C|Multiple payees
    D|Property included in settlement
    E|Settlement payments to nongovernmental entities, i.e., charities
    F|Settlement paid in full as of time of filing
    G|No payment received as of time of filing
    H|Deferred prosecution agreement
"""))

DISTRIBUTION_CODES = tuple("""
    1 2 3 4 5 6 7 8 9 B C E F G H J L M N P Q R S T U W
    18 1B 1D 1K 1L 1M 1P 28 2B 2D 2K 2L 2M 2P 3D
    48 4A 4B 4D 4G 4H 4K 4L 4M 4P 6W 7A 7B 7D 7K
    7L 7M 81 82 84 8B 8J 8K A4 A7 B1 B2 B4 B7 B8
    BG BL BM BP BU CD D1 D2 D3 D4 D7 DC G4 GB GK
    H4 J8 JP K1 K2 K4 K7 K8 KG L1 L2 L4 L7 LB M1
    M2 M4 M7 MB P1 P2 P4 PB PJ UB W6
""".split())

# Names of the file formats a document can be read from
FORMAT_ASCII = "ascii"
FORMAT_JSON = "json"
# Maximum number of payer "A" records in one transmission
MAXIMUM_TRANSMITTER_RECORD = 99000