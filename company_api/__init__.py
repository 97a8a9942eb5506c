# company_api -- FastAPI server + SQL models for company records
#
# Modules:
#   app          -- FastAPI application with lifespan management
#   config       -- environment configuration (.env aware)
#   database     -- PostgreSQL / SQLite async engine
#   models       -- SQLAlchemy ORM model (companies)
#   schemas      -- Pydantic request/response schemas
#   merge        -- partial-update merge strategies (reflection / mapping)
#   repository   -- entity store over an AsyncSession
#   service      -- company operations and not-found semantics
#   validators   -- creation rules (name, pib, maticni broj)
#   dependencies -- per-request service wiring
#   client       -- async httpx client for the API
#   routes/      -- API endpoints (/api/company)
