"""
Booking Reminder Runner
Run this as a daily scheduled job: python run_booking_reminders.py
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from booking_api.database import SessionLocal
from booking_api.workers.reminder_worker import send_booking_reminders

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def main() -> int:
    """Run one reminder batch; 0 on completion (even with failed sends), 1 on a fatal error"""
    db = SessionLocal()
    try:
        summary = asyncio.run(send_booking_reminders(db))
    except Exception as e:
        logger.error(f"❌ Fatal error in reminder process: {e}")
        return 1
    finally:
        db.close()

    print(summary.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
