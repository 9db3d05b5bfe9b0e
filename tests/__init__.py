"""
Life Dashboard Test Suite

This package contains tests for the Life Dashboard application:

- test_metrics.py: Totals, month filters, rollups and currency conversion
- test_record_store.py: Generic table CRUD and schema whitelisting
- test_view_state.py: Closed / creating / editing form state
- test_keywords.py: Work keyword list persistence
- test_praise.py: Encouragement messages
- test_init_db.py: Schema creation script
- test_auth.py: Login, logout and the mutation gate
- test_dashboard.py: Greeting and summary cards
- test_finance.py: Budget overview, ledger, savings and side income
- test_sidejob.py: Teaching sessions and brand collaborations
- test_work.py: STAR achievements and keyword tags
- test_personal_dev.py: Learning projects and progress records
- test_study.py: OPIC study log and streaks
- test_social.py: Xiaohongshu note statistics
- test_security.py: Security-focused tests (CSRF, cookies, input handling)

Run all tests:
    pytest tests/

Run specific test file:
    pytest tests/test_finance.py

Run with verbose output:
    pytest tests/ -v
"""
