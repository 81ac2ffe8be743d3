from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from timecard import __version__
from timecard.core.config import settings
from timecard.core.logging import setup_logging
from timecard.api.v1.work_summary import router as work_summary_router
from timecard.api.v1.meal_vouchers import router as meal_vouchers_router
from timecard.api.v1.leave_balances import router as leave_balances_router
from timecard.api.v1.reminders import router as reminders_router
from timecard.services.reminder_scheduler import ReminderScheduler, log_reminder


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    app.state.reminder_scheduler = ReminderScheduler(notify=log_reminder)
    yield
    # offene Timer beim Herunterfahren verwerfen
    app.state.reminder_scheduler.cancel_all()


app = FastAPI(
    title="Timecard API",
    description="Work-time accounting: standard, excess and overtime hours",
    version=__version__,
    lifespan=lifespan,
    # Swagger UI nur in Entwicklung – in Produktion DEBUG=false setzen
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"

app.include_router(work_summary_router, prefix=API_PREFIX)
app.include_router(meal_vouchers_router, prefix=API_PREFIX)
app.include_router(leave_balances_router, prefix=API_PREFIX)
app.include_router(reminders_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Timecard API", "version": __version__}
