from econsim.domain.banks.ports.financial_report_port import (
    FinancialReport,
    FinancialReportPort,
    ReportingPeriod,
)

__all__ = ["FinancialReport", "FinancialReportPort", "ReportingPeriod"]
