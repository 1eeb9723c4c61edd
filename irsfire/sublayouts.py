"""Layouts of positions 544-750 of the payee "B" record, one per form."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from irsfire import constants
from irsfire.spec import FieldProperty, FieldType, SpecField

_A = FieldType.ALPHANUMERIC
_AR = FieldType.ALPHANUMERIC_RIGHT_ALIGN
_N = FieldType.NUMERIC
_Z = FieldType.ZERO_NUMERIC
_PCT = FieldType.PERCENT
_YEAR = FieldType.DATE_YEAR
_DATE = FieldType.DATE

_NUL = FieldProperty.NULLABLE
_REQ = FieldProperty.REQUIRED
_APP = FieldProperty.APPLICABLE
_OMIT = FieldProperty.OMITTED

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


def _layout(fields: dict[str, tuple[int, int, FieldType, FieldProperty]]) -> Mapping[str, SpecField]:
    return MappingProxyType({name: SpecField(*spec) for name, spec in fields.items()})


def _state_local_tax(combined_code: bool = True) -> dict[str, tuple[int, int, FieldType, FieldProperty]]:
    fields = {
        "StateIncomeTaxWithheld": (179, 12, _Z, _APP),
        "LocalIncomeTaxWithheld": (191, 12, _Z, _APP),
    }
    if combined_code:
        fields["CombinedFSCode"] = (203, 2, _Z, _REQ)
    return fields


SUB_1097_BTC_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "IssuerIndicator": (3, 1, _N, _REQ),
    "Blank2": (4, 8, _A, _NUL),
    "Code": (12, 1, _A, _REQ),
    "Blank3": (13, 3, _A, _NUL),
    "UniqueIdentifier": (16, 39, _AR, _APP),
    "BondType": (55, 3, _A, _REQ),
    "Blank4": (58, 61, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank5": (179, 26, _A, _NUL),
    "Blank6": (205, 2, _A, _NUL),
})

SUB_1098_LAYOUT = _layout({
    "MortgageOriginationDate": (0, 8, _DATE, _APP),
    "PropertySecuringMortgageIndicator": (8, 1, _A, _APP),
    "PropertyADSecuringMortgage": (9, 39, _A, _APP),
    "Other": (48, 39, _A, _APP),
    "Blank1": (87, 39, _A, _NUL),
    "NumberMortgagedProperties": (126, 4, _Z, _APP),
    "SpecialDataEntries": (130, 49, _A, _APP),
    "MortgageAcquisitionDate": (179, 8, _DATE, _APP),
    "Blank2": (187, 18, _A, _NUL),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1098_C_LAYOUT = _layout({
    "Blank1": (0, 2, _A, _NUL),
    "TransactionIndicator": (2, 1, _A, _APP),
    "TransferAfterImprovementsIndicator": (3, 1, _A, _APP),
    "TransferMarketValueIndicator": (4, 1, _A, _APP),
    "Year": (5, 4, _YEAR, _APP),
    "Make": (9, 13, _A, _APP),
    "Model": (22, 22, _A, _APP),
    "VehicleIdentificationNumber": (44, 25, _A, _APP),
    "VehicleDescription": (69, 39, _A, _APP),
    "DateContribution": (108, 8, _DATE, _APP),
    "DoneeIndicator": (116, 1, _A, _APP),
    "IntangibleReligiousBenefitsIndicator": (117, 1, _A, _APP),
    "DeductionLessIndicator": (118, 1, _A, _APP),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "DateSale": (179, 8, _DATE, _APP),
    "GoodsServices": (187, 16, _A, _APP),
    "Blank2": (203, 2, _A, _NUL),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1098_E_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "OriginationInterestIndicator": (3, 1, _A, _APP),
    "Blank2": (4, 115, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank3": (179, 26, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1098_F_LAYOUT = _layout({
    "DateOrderAgreement": (0, 8, _DATE, _APP),
    "Jurisdiction": (8, 39, _A, _APP),
    "CaseNumber": (47, 39, _A, _APP),
    "MatterSuitAgreement": (86, 39, _A, _APP),
    "PaymentCode": (125, 6, _A, _APP),
    "SpecialDataEntries": (131, 60, _A, _APP),
    "Blank1": (191, 16, _A, _NUL),
})

SUB_1098_Q_LAYOUT = _layout({
    "Blank1": (0, 2, _A, _NUL),
    "AnnuityStartDate": (2, 8, _DATE, _APP),
    "AcceleratedIndicator": (10, 1, _A, _APP),
    **{month: (11 + 2 * index, 2, _Z, _OMIT) for index, month in enumerate(_MONTH_NAMES)},
    "Blank2": (35, 1, _A, _NUL),
    "NamePlan": (36, 39, _A, _APP),
    "PlanNumber": (75, 20, _A, _APP),
    "EmployerIdentificationNumber": (95, 9, _A, _APP),
    "Blank3": (104, 101, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1098_T_LAYOUT = _layout({
    "IdentificationNumber": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "HalfTimeStudentIndicator": (3, 1, _A, _APP),
    "GraduateStudentIndicator": (4, 1, _N, _APP),
    "AcademicPeriodIndicator": (5, 1, _N, _APP),
    "Blank2": (6, 1, _A, _NUL),
    "Blank3": (7, 112, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank4": (179, 26, _A, _NUL),
    "Blank5": (205, 2, _A, _NUL),
})

SUB_1099_A_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "PersonalLiabilityIndicator": (3, 1, _A, _APP),
    "DateAcquisitionKnowledgeAbandonment": (4, 8, _DATE, _APP),
    "DescriptionProperty": (12, 39, _A, _APP),
    "Blank2": (51, 68, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank3": (179, 26, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1099_B_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "NoncoveredSecurityIndicator": (1, 1, _A, _APP),
    "TypeGainLossIndicator": (2, 1, _A, _APP),
    "GrossProceedsIndicator": (3, 1, _A, _APP),
    "DateSoldDisposed": (4, 8, _DATE, _APP),
    "CUSIP": (12, 13, _AR, _APP),
    "DescriptionProperty": (25, 39, _A, _APP),
    "DateAcquired": (64, 8, _DATE, _APP),
    "LossNotAllowedIndicator": (72, 1, _A, _APP),
    "ApplicableCheckboxForm8949": (73, 1, _A, _APP),
    "ApplicableCheckboxCollectables": (74, 1, _A, _APP),
    "FATCA": (75, 1, _A, _APP),
    "ApplicableCheckboxQOF": (76, 1, _A, _APP),
    "Blank2": (77, 42, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_C_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "IdentifiableEventCode": (3, 1, _A, _REQ),
    "DateIdentifiableEvent": (4, 8, _DATE, _APP),
    "DebtDescription": (12, 39, _A, _APP),
    "PersonalLiabilityIndicator": (51, 1, _A, _APP),
    "Blank2": (52, 67, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank3": (179, 26, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1099_CAP_LAYOUT = _layout({
    "Blank1": (0, 4, _A, _NUL),
    "DateSaleExchange": (4, 8, _DATE, _APP),
    "Blank2": (12, 52, _A, _NUL),
    "NumberSharesExchanged": (64, 8, _Z, _APP),
    "ClassesStockExchanged": (72, 10, _A, _APP),
    "Blank3": (82, 37, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank4": (179, 26, _A, _NUL),
    "Blank5": (205, 2, _A, _NUL),
})

SUB_1099_DIV_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "ForeignCountryPossession": (3, 40, _A, _APP),
    "FATCA": (43, 1, _A, _APP),
    "Blank2": (44, 75, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_G_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "TradeBusinessIndicator": (3, 1, _A, _APP),
    "TaxYearRefund": (4, 4, _YEAR, _APP),
    "Blank2": (8, 111, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_H_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "NumberMonthsEligible": (3, 2, _N, _REQ),
    "Blank2": (5, 114, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank4": (179, 26, _A, _NUL),
    "Blank5": (205, 2, _A, _NUL),
})

SUB_1099_INT_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "ForeignCountry": (3, 40, _A, _APP),
    "CUSIP": (43, 13, _AR, _APP),
    "FATCA": (56, 1, _A, _APP),
    "Blank2": (57, 62, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_K_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "TypeFilerIndicator": (3, 1, _A, _REQ),
    "TypePaymentIndicator": (4, 1, _A, _REQ),
    "NumberPaymentTransactions": (5, 13, _Z, _APP),
    "Blank2": (18, 3, _A, _NUL),
    "PaymentSettlementNamePhoneNumber": (21, 40, _A, _APP),
    "MerchantCategoryCode": (61, 4, _Z, _APP),
    "Blank3": (69, 54, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1099_LS_LAYOUT = _layout({
    "Blank1": (0, 2, _A, _NUL),
    "DateSale": (2, 8, _DATE, _APP),
    "Blank2": (10, 109, _A, _NUL),
    "IssuersInformation": (119, 39, _A, _APP),
    "Blank3": (158, 47, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1099_LTC_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "TypePaymentIndicator": (3, 1, _A, _APP),
    "SocialSecurityNumberInsured": (4, 9, _A, _REQ),
    "NameInsured": (13, 40, _A, _REQ),
    "AddressInsured": (53, 40, _A, _APP),
    "CityInsured": (93, 40, _A, _APP),
    "StateInsured": (133, 2, _A, _REQ),
    "ZipCodeInsured": (135, 9, _N, _REQ),
    "StatusIllnessIndicator": (144, 1, _A, _APP),
    "DateCertified": (145, 8, _DATE, _APP),
    "QualifiedContractIndicator": (153, 1, _A, _APP),
    "Blank2": (154, 25, _A, _NUL),
    **_state_local_tax(combined_code=False),
    "Blank3": (203, 2, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1099_MISC_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "DirectSalesIndicator": (3, 1, _A, _APP),
    "FATCA": (4, 1, _A, _APP),
    "Blank2": (5, 114, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_NEC_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "DirectSalesIndicator": (3, 1, _A, _APP),
    # 175 is the right width; the publication's 173 is a misprint
    "Blank2": (4, 175, _A, _NUL),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_OID_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 2, _A, _NUL),
    "Description": (3, 39, _A, _APP),
    "FATCA": (42, 1, _A, _APP),
    "Blank2": (43, 76, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_PATR_LAYOUT = _layout({
    "SecondTinNotice": (0, 1, _A, _APP),
    "Blank1": (1, 118, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_Q_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "TrusteeTransferIndicator": (3, 1, _A, _APP),
    "TypeTuitionPayment": (4, 1, _A, _APP),
    "DesignatedBeneficiary": (5, 1, _A, _APP),
    "Blank2": (6, 113, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank3": (179, 26, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1099_R_LAYOUT = _layout({
    "Blank1": (0, 1, _A, _NUL),
    "DistributionCode": (1, 2, _A, _REQ),
    "TaxableAmountNotDeterminedIndicator": (3, 1, _A, _APP),
    "ISSIndicator": (4, 1, _A, _APP),
    "TotalDistributionIndicator": (5, 1, _A, _APP),
    "PercentageTotalDistribution": (6, 2, _PCT, _APP),
    "FirstYearDesignatedRothContribution": (8, 4, _YEAR, _OMIT),
    "FATCA": (12, 1, _A, _APP),
    "DatePayment": (13, 8, _DATE, _APP),
    "Blank2": (21, 98, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_1099_S_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "PropertyServicesIndicator": (3, 1, _A, _APP),
    "DateClosing": (4, 8, _DATE, _APP),
    "AddressLegalDescription": (12, 39, _A, _APP),
    "ForeignTransferor": (51, 1, _A, _APP),
    "Blank2": (52, 67, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(combined_code=False),
    "Blank3": (203, 2, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_1099_SA_LAYOUT = _layout({
    "Blank1": (0, 1, _A, _NUL),
    "DistributionCode": (1, 1, _A, _REQ),
    "Blank2": (2, 1, _A, _NUL),
    "MedicareAdvantageMSAIndicator": (3, 1, _A, _APP),
    "HSAIndicator": (4, 1, _A, _APP),
    "ArcherMSAIndicator": (5, 1, _A, _APP),
    "Blank3": (52, 113, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(combined_code=False),
    "Blank4": (203, 2, _A, _NUL),
    "Blank5": (205, 2, _A, _NUL),
})

SUB_1099_SB_LAYOUT = _layout({
    "Blank1": (0, 119, _A, _NUL),
    "IssuersInformation": (119, 39, _A, _APP),
    "Blank2": (158, 47, _A, _NUL),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_3921_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "DateOptionGranted": (3, 8, _DATE, _REQ),
    "DateOptionExercised": (11, 8, _DATE, _REQ),
    "NumberSharesTransferred": (19, 8, _Z, _APP),
    "Blank2": (27, 4, _A, _NUL),
    "OtherThanTransferorInformation": (31, 40, _A, _APP),
    "Blank3": (71, 48, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank4": (179, 26, _A, _NUL),
    "Blank5": (205, 2, _A, _NUL),
})

SUB_3922_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "DateOptionGranted": (3, 8, _DATE, _REQ),
    "DateOptionExercised": (11, 8, _DATE, _REQ),
    "NumberSharesTransferred": (19, 8, _Z, _APP),
    "DateLegalTitleTransferred": (27, 8, _DATE, _REQ),
    "Blank2": (35, 84, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank3": (179, 26, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_5498_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "IRAIndicator": (3, 1, _A, _APP),
    "SEPIndicator": (4, 1, _A, _APP),
    "SIMPLEIndicator": (5, 1, _A, _APP),
    "RothIRAIndicator": (6, 1, _A, _APP),
    "RMDIndicator": (7, 1, _A, _APP),
    "YearPostponedContribution": (8, 4, _YEAR, _OMIT),
    "PostponedContributionCode": (12, 2, _A, _APP),
    "PostponedContributionReason": (14, 6, _A, _APP),
    "RepaymentCode": (20, 2, _A, _APP),
    "RMDDate": (22, 8, _DATE, _APP),
    "Codes": (30, 2, _A, _APP),
    "Blank2": (32, 87, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank3": (179, 24, _A, _NUL),
    "CombinedFSCode": (203, 2, _Z, _REQ),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_5498_ESA_LAYOUT = _layout({
    "Blank1": (0, 119, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank2": (179, 26, _A, _NUL),
    "Blank3": (205, 2, _A, _NUL),
})

SUB_5498_SA_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "MedicareAdvantageMSAIndicator": (3, 1, _A, _APP),
    "HSAIndicator": (4, 1, _A, _APP),
    "ArcherMSAIndicator": (5, 1, _A, _APP),
    "Blank2": (6, 113, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    "Blank3": (179, 26, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

SUB_W2G_LAYOUT = _layout({
    "Blank1": (0, 3, _A, _NUL),
    "TypeWagerCode": (3, 1, _A, _REQ),
    "DateWon": (4, 8, _DATE, _REQ),
    "Transaction": (12, 15, _A, _APP),
    "Race": (27, 5, _A, _APP),
    "Cashier": (32, 5, _A, _APP),
    "Window": (37, 5, _A, _APP),
    "FirstID": (42, 15, _A, _APP),
    "SecondID": (57, 15, _A, _APP),
    "Blank2": (72, 47, _A, _NUL),
    "SpecialDataEntries": (119, 60, _A, _APP),
    **_state_local_tax(combined_code=False),
    "Blank3": (203, 2, _A, _NUL),
    "Blank4": (205, 2, _A, _NUL),
})

# Extension layouts keyed by the extension block type of the payee record
SUB_LAYOUTS: Mapping[str, Mapping[str, SpecField]] = MappingProxyType({
    constants.SUB_1097_BTC_TYPE: SUB_1097_BTC_LAYOUT,
    constants.SUB_1098_TYPE: SUB_1098_LAYOUT,
    constants.SUB_1098_C_TYPE: SUB_1098_C_LAYOUT,
    constants.SUB_1098_E_TYPE: SUB_1098_E_LAYOUT,
    constants.SUB_1098_F_TYPE: SUB_1098_F_LAYOUT,
    constants.SUB_1098_Q_TYPE: SUB_1098_Q_LAYOUT,
    constants.SUB_1098_T_TYPE: SUB_1098_T_LAYOUT,
    constants.SUB_1099_A_TYPE: SUB_1099_A_LAYOUT,
    constants.SUB_1099_B_TYPE: SUB_1099_B_LAYOUT,
    constants.SUB_1099_C_TYPE: SUB_1099_C_LAYOUT,
    constants.SUB_1099_CAP_TYPE: SUB_1099_CAP_LAYOUT,
    constants.SUB_1099_DIV_TYPE: SUB_1099_DIV_LAYOUT,
    constants.SUB_1099_G_TYPE: SUB_1099_G_LAYOUT,
    constants.SUB_1099_H_TYPE: SUB_1099_H_LAYOUT,
    constants.SUB_1099_INT_TYPE: SUB_1099_INT_LAYOUT,
    constants.SUB_1099_K_TYPE: SUB_1099_K_LAYOUT,
    constants.SUB_1099_LS_TYPE: SUB_1099_LS_LAYOUT,
    constants.SUB_1099_LTC_TYPE: SUB_1099_LTC_LAYOUT,
    constants.SUB_1099_MISC_TYPE: SUB_1099_MISC_LAYOUT,
    constants.SUB_1099_NEC_TYPE: SUB_1099_NEC_LAYOUT,
    constants.SUB_1099_OID_TYPE: SUB_1099_OID_LAYOUT,
    constants.SUB_1099_PATR_TYPE: SUB_1099_PATR_LAYOUT,
    constants.SUB_1099_Q_TYPE: SUB_1099_Q_LAYOUT,
    constants.SUB_1099_R_TYPE: SUB_1099_R_LAYOUT,
    constants.SUB_1099_S_TYPE: SUB_1099_S_LAYOUT,
    constants.SUB_1099_SA_TYPE: SUB_1099_SA_LAYOUT,
    constants.SUB_1099_SB_TYPE: SUB_1099_SB_LAYOUT,
    constants.SUB_3921_TYPE: SUB_3921_LAYOUT,
    constants.SUB_3922_TYPE: SUB_3922_LAYOUT,
    constants.SUB_5498_TYPE: SUB_5498_LAYOUT,
    constants.SUB_5498_ESA_TYPE: SUB_5498_ESA_LAYOUT,
    constants.SUB_5498_SA_TYPE: SUB_5498_SA_LAYOUT,
    constants.SUB_W2G_TYPE: SUB_W2G_LAYOUT,
})