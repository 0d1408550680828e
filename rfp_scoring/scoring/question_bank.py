"""
Standard Prequalification Questionnaire
rfp_scoring/scoring/question_bank.py

The default ten-question vendor prequalification set (total weight 100).

Threshold ladders (fraction of weight):
    years_in_business   >=10: 1.0   >=5: 0.7    >=3: 0.5    else 0.3
    annual_revenue      >=10M: 1.0  >=5M: 0.8   >=1M: 0.6   else 0.4
    employee_count      >=100: 1.0  >=50: 0.8   >=20: 0.6   else 0.4

Insurance amount mapping:
    Less than $1M 0.2 | $1M - $2M 0.4 | $2M - $5M 0.6 | $5M - $10M 0.8 | More than $10M 1.0
"""

from typing import List

from rfp_scoring.models.enumerations import QuestionType
from rfp_scoring.models.prequalification import (
    PrequalificationQuestion,
    ScoreTier,
    ValidationBounds,
)
from rfp_scoring.scoring.registry import QuestionRegistry


INSURANCE_AMOUNT_OPTIONS = [
    "Less than $1M", "$1M - $2M", "$2M - $5M", "$5M - $10M", "More than $10M",
]

STANDARD_PREQUALIFICATION_QUESTIONS: List[PrequalificationQuestion] = [
    PrequalificationQuestion(
        id="years_in_business",
        question="How many years has your company been in business?",
        type=QuestionType.NUMERIC,
        required=True,
        weight=10,
        validation=ValidationBounds(min=1, max=100),
        tiers=[
            ScoreTier(threshold=10, fraction=1.0),
            ScoreTier(threshold=5, fraction=0.7),
            ScoreTier(threshold=3, fraction=0.5),
            ScoreTier(threshold=0, fraction=0.3),
        ],
    ),
    PrequalificationQuestion(
        id="annual_revenue",
        question="What is your company's annual revenue (USD)?",
        type=QuestionType.NUMERIC,
        required=True,
        weight=15,
        validation=ValidationBounds(min=0),
        tiers=[
            ScoreTier(threshold=10_000_000, fraction=1.0),
            ScoreTier(threshold=5_000_000, fraction=0.8),
            ScoreTier(threshold=1_000_000, fraction=0.6),
            ScoreTier(threshold=0, fraction=0.4),
        ],
    ),
    PrequalificationQuestion(
        id="employee_count",
        question="How many full-time employees does your company have?",
        type=QuestionType.NUMERIC,
        required=True,
        weight=10,
        validation=ValidationBounds(min=1),
        tiers=[
            ScoreTier(threshold=100, fraction=1.0),
            ScoreTier(threshold=50, fraction=0.8),
            ScoreTier(threshold=20, fraction=0.6),
            ScoreTier(threshold=0, fraction=0.4),
        ],
    ),
    PrequalificationQuestion(
        id="company_type",
        question="What is your company's business structure?",
        type=QuestionType.SELECT,
        required=True,
        weight=5,
        options=[
            "Sole Proprietorship", "Partnership", "LLC",
            "S-Corporation", "C-Corporation", "Non-Profit",
        ],
    ),
    PrequalificationQuestion(
        id="primary_industries",
        question="What are your primary industries of operation? (Select all that apply)",
        type=QuestionType.MULTISELECT,
        required=True,
        weight=10,
        options=[
            "IT Services", "Construction", "Healthcare", "Education", "Finance",
            "Manufacturing", "Retail", "Consulting", "Real Estate", "Transportation",
        ],
    ),
    PrequalificationQuestion(
        id="certifications",
        question="Do you have any relevant certifications? (Select all that apply)",
        type=QuestionType.MULTISELECT,
        required=False,
        weight=15,
        options=[
            "ISO 9001", "ISO 27001", "SOC 2", "CMMI Level 3", "LEED Certified",
            "OSHA Compliant", "GSA Certified", "Women-Owned", "Minority-Owned",
            "Veteran-Owned", "Disability-Owned", "HUBZone Certified",
        ],
    ),
    PrequalificationQuestion(
        id="insurance_coverage",
        question="Do you have general liability insurance coverage?",
        type=QuestionType.YESNO,
        required=True,
        weight=10,
    ),
    PrequalificationQuestion(
        id="insurance_amount",
        question="What is your general liability insurance coverage amount?",
        type=QuestionType.SELECT,
        required=True,
        weight=10,
        options=INSURANCE_AMOUNT_OPTIONS,
        option_fractions={
            "Less than $1M": 0.2,
            "$1M - $2M": 0.4,
            "$2M - $5M": 0.6,
            "$5M - $10M": 0.8,
            "More than $10M": 1.0,
        },
    ),
    PrequalificationQuestion(
        id="references",
        question="Can you provide at least 3 client references?",
        type=QuestionType.YESNO,
        required=True,
        weight=10,
    ),
    PrequalificationQuestion(
        id="financial_statements",
        question="Can you provide audited financial statements for the last 3 years?",
        type=QuestionType.YESNO,
        required=True,
        weight=5,
    ),
]


def standard_question_registry() -> QuestionRegistry:
    return QuestionRegistry(STANDARD_PREQUALIFICATION_QUESTIONS)
