from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from schooladmin.database import get_db
from schooladmin.schemas.analytics import FinancialSummary, GenderDistribution
from schooladmin.utils.access import require
from schooladmin.utils.analytics import financial_summary, gender_distribution

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/classes/{class_id}/gender", response_model=GenderDistribution,
            dependencies=[Depends(require("analytics.gender"))])
def class_gender(class_id: str, db: Session = Depends(get_db)):
    return gender_distribution(db, class_id)


@router.get("/finance", response_model=FinancialSummary, dependencies=[Depends(require("analytics.finance"))])
def finance(
    other_income: float = Query(0, ge=0, alias="otherIncome"),
    other_expenses: float = Query(0, ge=0, alias="otherExpenses"),
    db: Session = Depends(get_db),
):
    """
    Salaries vs. fee income. otherIncome / otherExpenses are added to the
    derived totals before netProfit is computed.
    """
    return FinancialSummary(**financial_summary(db, other_income, other_expenses))
