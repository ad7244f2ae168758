"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- Services: Workflows shared by handlers (alerts, moderation, audit)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Result dataclasses returned by handlers
- services/: Alert workflow, comment moderation, email templates

The application layer orchestrates domain logic but contains no business rules.
"""
