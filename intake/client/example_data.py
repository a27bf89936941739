"""Sample project material and the intake document produced from it."""

SAMPLE_CHANNEL = "#project-atlas-kickoff"

SAMPLE_TRANSCRIPTS = """Meeting Transcript - Project Atlas Kickoff (Feb 14, 2026)

Attendees: Sarah Chen (PM), Mike Rodriguez (Lead Engineer), Lisa Park (Design Lead), James Wilson (VP Product)

James: "We need to rebuild our customer onboarding flow. Current drop-off rate is 43% at step 3. We're losing an estimated $2.1M ARR from this."

Sarah: "What's the timeline looking like?"

James: "We need this shipped by end of Q2. Board presentation is in July and this is the centerpiece."

Mike: "We'll need to integrate with the new identity service. That's a dependency on Platform team. I'd suggest we use React Server Components for the new flow - it'll cut load times significantly."

Lisa: "I'll need at least 2 weeks for user research before we start designing. We should run usability tests with 8-10 users from different segments."

Sarah: "Budget constraints?"

James: "We have headcount for 2 additional engineers. Total budget approved is $450K including tooling.\""""

SAMPLE_NOTES = """Quick Notes from Atlas Pre-Meeting:
- Current onboarding: 5 steps, avg completion time 12 min
- Competitor benchmark: Acme Corp does it in 3 steps / 4 min
- Key stakeholders: Product (James W), Engineering (Mike R), Design (Lisa P), Customer Success (TBD)
- Risk: Platform team identity service may slip to March
- Success = reduce drop-off to under 20%, completion time under 6 min
- Need mobile-responsive flow (38% of signups are mobile)
- Must maintain SOC2 compliance throughout
- Analytics: need funnel tracking at each step"""

SAMPLE_DOCUMENT: dict[str, object] = {
    "document_title": "Project Atlas - Customer Onboarding Redesign",
    "generation_date": "2026-02-18",
    "data_sources": [
        "#project-atlas-kickoff (Slack)",
        "Kickoff Meeting Transcript (Feb 14)",
        "Pre-Meeting Notes",
    ],
    "executive_summary": (
        "Project Atlas aims to redesign the customer onboarding flow to address a "
        "43% drop-off rate at step 3, which is costing an estimated $2.1M in annual "
        "recurring revenue. The project is sponsored by VP Product James Wilson, "
        "targets Q2 2026 delivery and has an approved budget of $450K."
    ),
    "problem_statement": (
        "## Current State\n"
        "The onboarding flow has **5 steps** with an average completion time of "
        "**12 minutes** and a **43% drop-off rate at step 3**.\n"
        "\n"
        "## Competitive Gap\n"
        "- **Acme Corp** completes onboarding in **3 steps / 4 minutes**\n"
        "\n"
        "## Impact\n"
        "- Revenue impact: $2.1M ARR lost annually"
    ),
    "project_goals": (
        "1. **Reduce onboarding drop-off rate** from 43% to under 20%\n"
        "2. **Cut completion time** from 12 minutes to under 6 minutes\n"
        "3. **Reduce onboarding steps** from 5 to 3\n"
        "4. **Improve mobile experience** - 38% of signups originate from mobile devices\n"
        "5. **Maintain SOC2 compliance** throughout the redesigned flow"
    ),
    "success_criteria": (
        "- Drop-off rate at step 3 reduced to **< 20%**\n"
        "- Overall completion time **< 6 minutes**\n"
        "- Funnel analytics operational with real-time dashboards"
    ),
    "stakeholder_map": (
        "### Executive Sponsor\n"
        "- **James Wilson** - VP Product (budget owner)\n"
        "\n"
        "### Core Team\n"
        "- **Sarah Chen** - Project Manager\n"
        "- **Mike Rodriguez** - Lead Engineer\n"
        "- **Lisa Park** - Design Lead\n"
        "\n"
        "### Dependencies\n"
        "- **Platform Team** - Identity service integration"
    ),
    "project_scope": (
        "### In Scope\n"
        "- Redesign of onboarding UI/UX (5 steps consolidated to 3)\n"
        "- Identity service integration\n"
        "- Analytics instrumentation\n"
        "\n"
        "### Out of Scope\n"
        "- Backend identity service development\n"
        "- Changes to billing/payment flow"
    ),
    "technical_requirements": (
        "- **Frontend Framework**: React Server Components\n"
        "- **Identity Integration**: New identity service API\n"
        "- **Compliance**: SOC2 controls maintained throughout flow"
    ),
    "timeline_milestones": (
        "### Phase 1: Discovery & Research (Weeks 1-2)\n"
        "- User research with 8-10 participants\n"
        "\n"
        "### Phase 2: Design & Development (Weeks 3-12)\n"
        "- Core flow, identity integration and mobile optimization\n"
        "\n"
        "**Target Delivery**: End of Q2 2026"
    ),
    "resource_needs": (
        "### Team\n"
        "- **2 Additional Engineers** (approved headcount)\n"
        "- 1 Customer Success representative (TBD)\n"
        "\n"
        "### Budget\n"
        "- **Total Approved**: $450,000"
    ),
    "needs_clarification": [
        {
            "priority": "High",
            "category": "Dependency",
            "description": "Confirm Platform team identity service delivery date.",
        },
        {
            "priority": "Medium",
            "category": "Technical",
            "description": "Clarify the migration plan for users mid-onboarding at launch.",
        },
        {
            "priority": "Low",
            "category": "Analytics",
            "description": "Confirm which analytics platform will be used for funnel tracking.",
        },
    ],
    "processing_status": "completed",
}
