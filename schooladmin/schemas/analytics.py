from pydantic import BaseModel, Field

class GenderDistribution(BaseModel):
    male: int = 0
    female: int = 0
    other: int = 0

class FinancialSummary(BaseModel):
    total_salaries: float = Field(..., alias="totalSalaries")
    total_fees: float = Field(..., alias="totalFees")
    total_income: float = Field(..., alias="totalIncome")
    total_expenses: float = Field(..., alias="totalExpenses")
    net_profit: float = Field(..., alias="netProfit")
    class Config:
        populate_by_name = True
