"""
scoring/ — RFP Evaluation Scoring Engine

Modules:
    utils.py                  - Zero-division-safe numeric helpers
    registry.py               - Criterion & Question registries
    rubric_validator.py       - Rubric weight distribution check
    raw_score_aggregator.py   - Unweighted average of evaluator scores
    consensus_scorer.py       - Weighted consensus total / percentage
    consensus_reconciler.py   - Consensus proposals from evaluator scores
    prequalification.py       - Prequalification composite scorer + tiers
    question_bank.py          - Standard prequalification questionnaire
    submission_service.py     - Submission score summary block
"""
