"""
Econ Forecast Root Module

GDP growth forecasting service built from macroeconomic indicator
scenarios.

Layer Structure:
- Domain: Indicator entities, validation, feature building and timelines
- Application: Use cases, DTOs and the shared forecast context
- Infrastructure: CSV corpus, model artifact loading, HTTP client
- Presentation: Controllers for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
