from core.schemas import AgentResponse, Plan

# Served whenever live generation is unavailable or fails. Validated at import time,
# so a broken sample stops the process at start-up rather than at request time.
SAMPLE_PLAN_DATA = {
    "executiveSummary": (
        "Run the store on a weekly operating rhythm: refresh the catalog with new arrivals "
        "and price tests, push them through Instagram, TikTok and paid Meta/Google campaigns, "
        "and convert first-time buyers into Aeon Money members with tiered rewards. "
        "Automations handle inventory gaps, abandoned carts and support escalations so the "
        "team only reviews approvals and the weekly growth report."
    ),
    "taskMatrix": [
        {
            "title": "List new arrivals with price testing",
            "owner": "Agent",
            "cadence": "Twice weekly",
            "successMetric": "New listings live within 24h; winning price variant identified per SKU in 7 days",
        },
        {
            "title": "Launch Meta and Google campaigns",
            "owner": "Agent with marketing approval",
            "cadence": "Weekly budget review",
            "successMetric": "Blended ROAS above 3.0",
        },
        {
            "title": "Refresh Aeon Money rewards",
            "owner": "Loyalty lead",
            "cadence": "Monthly",
            "successMetric": "Member repeat purchase rate up 10% month over month",
        },
        {
            "title": "Draft weekly growth report",
            "owner": "Agent",
            "cadence": "Every Monday",
            "successMetric": "Report delivered before 10:00 with revenue, ROAS and loyalty signups",
        },
    ],
    "automations": [
        {
            "title": "Inventory gap alert",
            "description": "Flags best sellers that are about to sell out before a campaign spends against them.",
            "trigger": "Stock for a top-20 SKU drops below 14 days of cover",
            "action": "Pause ads for the SKU and open a restock task for the merchandiser",
        },
        {
            "title": "Abandoned cart recovery",
            "description": "Two-step reminder sequence with an Aeon Money points incentive.",
            "trigger": "Cart abandoned for 2 hours by a signed-in shopper",
            "action": "Send reminder email, then a 200-point bonus offer after 24 hours",
        },
        {
            "title": "Support escalation",
            "description": "Routes unhappy customers to a human before the ticket ages.",
            "trigger": "Ticket with negative sentiment or open longer than 12 hours",
            "action": "Escalate to the support lead with order history attached",
        },
    ],
    "channelPlaybooks": [
        {
            "channel": "instagram",
            "content": "Daily product drops in Reels and carousels, weekly styling story featuring new arrivals",
            "cadence": "Daily",
        },
        {
            "channel": "tiktok",
            "content": "15-second try-on and unboxing clips cut from supplied video assets",
            "cadence": "4 posts per week",
        },
        {
            "channel": "email",
            "content": "Weekly new-arrivals digest with member-only early access for Aeon Money holders",
            "cadence": "Weekly",
        },
    ],
    "adStrategy": [
        {
            "platform": "Meta",
            "audience": "Lookalikes of repeat buyers plus retargeting of 30-day site visitors",
            "creatives": "Reels cut from new-arrival drops, catalog carousel ads",
            "budgetNotes": "60% of monthly budget, shift toward the best ROAS ad set every Monday",
        },
        {
            "platform": "Google",
            "audience": "High-intent shopping queries for core categories and branded search",
            "creatives": "Performance Max with refreshed product feed and lifestyle imagery",
            "budgetNotes": "40% of monthly budget, cap branded search at 10%",
        },
    ],
    "seoPlan": (
        "Rewrite titles and descriptions for the top 50 SKUs around category search terms, "
        "add alt text to every product image, publish one buying guide per month and fix "
        "broken collection links surfaced in the weekly crawl."
    ),
    "loyaltyPlan": (
        "Enrol buyers into Aeon Money at checkout with a 500-point welcome bonus, introduce "
        "Silver and Gold tiers at 3 and 6 orders, and run a double-points weekend whenever "
        "a new collection drops."
    ),
}

SAMPLE_PLAN = Plan.model_validate(SAMPLE_PLAN_DATA)
SAMPLE_RAW = SAMPLE_PLAN.model_dump_json(by_alias=True, indent=2)
SAMPLE_RESPONSE = AgentResponse(plan=SAMPLE_PLAN, raw=SAMPLE_RAW, used_sample=True)


def get_sample_response() -> AgentResponse:
    """Fallback response. A deep copy, so callers can never alter the shared sample."""
    return SAMPLE_RESPONSE.model_copy(deep=True)
