"""The Co-Build framework definition.

Immutable configuration: seven stages, each holding assets numbered within
1-27 with their checklist items. Numbers ascend across stages; there is no
asset #14. Checklist IDs are derived from the asset number and the 1-based
position of the item.
"""

from cobuilder.framework.models import Asset, ChecklistItem, Stage

MIN_ASSET_NUMBER = 1
MAX_ASSET_NUMBER = 27


def _asset(number: int, title: str, purpose: str, *items: str) -> Asset:
    return Asset(
        number=number,
        title=title,
        purpose=purpose,
        checklist=tuple(
            ChecklistItem(id=f"{number}-{index}", text=text)
            for index, text in enumerate(items, start=1)
        ),
    )


STAGES: tuple[Stage, ...] = (
    Stage(
        number="00",
        title="The Invention Gate",
        subtitle="Why this market won't solve itself",
        assets=(
            _asset(
                1,
                "Risk Capital + Invention One-Pager",
                "True risk-capital logic: why the market won't solve this, what must be "
                "invented, and why insiders can win globally.",
                "Identified the structural market failure",
                "Articulated why insiders have an unfair advantage",
                "Defined the domain constraint",
                "Explained the why-now timing",
                "Drafted the Risk Capital + Invention One-Pager",
            ),
            _asset(
                2,
                "Category Ambition Gate",
                'Forces category clarity: "if we win, what global category do we own?" '
                "Filters out small tools and pilotware early.",
                "Defined the global category you aim to own",
                "Passed the $1B+ world-beating test",
                "Confirmed this is NOT just a small tool or feature",
                "Documented category ambition rationale",
            ),
        ),
    ),
    Stage(
        number="01",
        title="Problem Deep Dive",
        subtitle="Quantifying pain that funds solutions",
        assets=(
            _asset(
                3,
                "Problem Deep Dive + Quantification",
                "Economic truth: pain, cost, frequency, who pays, and how it's measured. "
                "This defines target outcomes.",
                "Quantified frequency of the pain point",
                "Measured severity and cost of each occurrence",
                "Identified budget owner and allocation status",
                "Articulated urgency and why-now",
                "Documented economic impact with data",
            ),
            _asset(
                4,
                "Workflow Map + Data Touchpoints",
                "Maps decisions and actions + where data is created/owned + where AI "
                "intervenes. This is NOT about chatbots.",
                "Mapped the end-to-end workflow",
                "Identified all decision points where AI could intervene",
                "Documented data creation points and ownership",
                "Defined where AI adds value without breaking workflow",
                "Created visual workflow diagram",
            ),
        ),
    ),
    Stage(
        number="02",
        title="Customer & Validation",
        subtitle="ICP, assumptions, and kill switches",
        assets=(
            _asset(
                5,
                "ICP Definition",
                "Define your Ideal Customer Profile with precision. Who is the buyer, who "
                "is the user, and what does their world look like?",
                "Defined the buyer persona (who signs the check)",
                "Defined the user persona (who uses the product daily)",
                "Identified company size, industry, and geography",
                "Documented the buyer's current workflow and tools",
                "Validated ICP with at least 3 real conversations",
            ),
            _asset(
                6,
                "Assumptions + Kill Switches",
                "Every venture is built on assumptions. This asset forces you to name them "
                "explicitly and define what evidence would kill the venture.",
                "Listed all critical assumptions (market, tech, customer, data)",
                "Ranked assumptions by risk (highest uncertainty first)",
                "Defined kill switch criteria for each critical assumption",
                "Created a testing plan for top 3 assumptions",
                "Set timeline for assumption validation",
            ),
            _asset(
                7,
                "Discovery Interviews",
                "Structured customer discovery to validate or invalidate your assumptions. "
                "Not sales calls, learning calls.",
                "Prepared interview script aligned to key assumptions",
                "Conducted minimum 10 discovery interviews",
                "Documented findings and patterns",
                "Updated ICP based on interview insights",
                "Identified potential design partners from interviews",
            ),
        ),
    ),
    Stage(
        number="03",
        title="Data Rights & AI Feasibility",
        subtitle="The moat isn't the model, it's the data contract",
        assets=(
            _asset(
                8,
                "Design Partner Pipeline",
                "Ensures selling while validating; selects accounts most likely to fund pilots.",
                "Identified 5-10 potential design partners",
                "Qualified partners based on problem severity and willingness to pay",
                "Initiated outreach to top 5 candidates",
                "Secured at least 2 committed design partners",
                "Documented partner expectations and success criteria",
            ),
            _asset(
                9,
                "AI Feasibility Brief",
                "Decides: rules/ML/LLM-RAG/agents; what's automatable now vs. human-in-loop.",
                "Assessed technical feasibility for each AI intervention point",
                "Determined approach: rules vs ML vs LLM/RAG vs agents",
                "Identified what requires human-in-the-loop (HITL)",
                "Documented technical risks and mitigation strategies",
                "Estimated compute and infrastructure requirements",
            ),
            _asset(
                10,
                "Eval Plan + Ground Truth",
                "Defines 'good': gold set, scoring, acceptance thresholds, failure modes.",
                "Created gold standard evaluation dataset",
                "Defined scoring methodology and metrics",
                "Set acceptance thresholds for accuracy/quality",
                "Documented known failure modes",
                "Established evaluation cadence and process",
            ),
            _asset(
                11,
                "Security Pack",
                "The data unblocker. Without this, enterprise deals stall.",
                "Defined inference vs training data rights",
                "Created data retention policy",
                "Established redaction rules for sensitive data",
                "Documented access controls and permissions",
                "Built auditability framework",
            ),
            _asset(
                12,
                "Data Advantage Contract",
                'Makes "data moat" contractual, not assumed. Without this, you have no moat.',
                "Drafted data advantage contract template",
                "Defined exclusivity terms",
                "Secured training and fine-tuning rights",
                "Established feedback loop rights",
                "Agreed retention scope and usage boundaries",
                "Legal review completed",
            ),
            _asset(
                13,
                "The Moat Ledger",
                "Tracks compounding loops with evidence. The moat isn't theoretical, "
                "it's documented.",
                "Created Moat Ledger document",
                "Documented data rights evidence",
                "Tracked eval lift from proprietary data",
                "Measured workflow integration depth",
                "Recorded regulatory/compliance achievements",
            ),
        ),
    ),
    Stage(
        number="04",
        title="The PRD Culmination",
        subtitle="Everything converges into what we build",
        assets=(
            _asset(
                15,
                "PRD v1 + Not-to-Build",
                "Dual PRD: workflow requirements + intelligence requirements. "
                "Explicit exclusions.",
                "Drafted workflow requirements section",
                "Defined all integration points",
                "Set UI/UX constraints and edge cases",
                "Established quality thresholds for AI",
                "Defined latency targets",
                "Calculated cost per inference budget",
                "Set safety and HITL gates",
                "Created explicit Not-to-Build list for v1",
                "PRD reviewed by technical and business stakeholders",
                "PRD approved and signed off",
            ),
        ),
    ),
    Stage(
        number="05",
        title="Build & Sell",
        subtitle="Architecture, LOI, pilot, prototype",
        assets=(
            _asset(
                16,
                "Enterprise Architecture Canvas",
                "Technical architecture for enterprise-grade AI product.",
                "Designed model gateway architecture",
                "Set up RAG store and retrieval pipeline",
                "Built eval harness for continuous testing",
                "Implemented telemetry and monitoring",
                "Created policy layer for governance",
                "Architecture reviewed by engineering leads",
            ),
            _asset(
                17,
                "Design Partner Offer + LOI",
                "Secures paid pilot with AI + data + productization clauses.",
                "Drafted design partner offer document",
                "Included AI usage and data terms",
                "Added productization clauses",
                "Negotiated with design partners",
                "Secured at least 1 signed LOI",
                "Legal review of LOI completed",
            ),
            _asset(
                18,
                "Pilot SOW + KPI Dashboard",
                "The pilot SOW is where ventures die or scale.",
                "Drafted Pilot SOW with clear scope",
                "Defined outcome KPIs aligned to customer goals",
                "Set model KPIs (accuracy, latency, cost)",
                "Established ops KPIs (uptime, support, deployment)",
                "Created config vs custom matrix",
                "Built KPI dashboard for real-time tracking",
                "Standard deploy spec documented",
                "Pilot SOW signed by design partner",
            ),
            _asset(
                19,
                "Prototype Sprint + Demo",
                "Shows workflow value + eval proof + safety controls + latency/cost.",
                "Completed prototype sprint",
                "Prototype demonstrates core workflow value",
                "Eval results documented and meet thresholds",
                "Safety controls implemented and tested",
                "Latency and cost benchmarks met",
                "Demo prepared for stakeholders",
                "Demo delivered to design partners",
            ),
        ),
    ),
    Stage(
        number="06",
        title="Scale & Spinout",
        subtitle="Sales pack, pricing, roadmap, and exit",
        assets=(
            _asset(
                20,
                "Sales Pack (Trust Pack)",
                "Repeatable selling kit for scaling beyond design partners.",
                "Created sales narrative and deck",
                "Prepared demo and eval report",
                "Documented security answers for enterprise buyers",
                "Listed known failure modes and mitigations",
                "Created standard rollout plan",
                "Sales pack tested with 3 non-design-partner prospects",
            ),
            _asset(
                21,
                "Pricing + Unit Economics",
                "Compute-aware pricing model.",
                "Developed outcome-based pricing model",
                "Calculated compute + HITL cost per task",
                "Modeled margin at scale (10x, 100x current)",
                "Ran sensitivity analysis on key variables",
                "Validated pricing with design partner feedback",
            ),
            _asset(
                22,
                "Roadmap (6/12/18 months) + Gates",
                "AI-native roadmap with clear gates.",
                "Created 6-month roadmap with milestones",
                "Created 12-month roadmap with milestones",
                "Created 18-month roadmap with milestones",
                "Defined gates at each milestone",
                "Aligned roadmap with fundraising timeline",
            ),
            _asset(
                23,
                "Operating Model Blueprint",
                "How the venture operates day-to-day at scale.",
                "Defined model release process",
                "Set eval cadence schedule",
                "Created incident response playbook",
                "Established red-teaming protocol",
                "Built feedback and labeling ops pipeline",
                "Designed customer support model",
            ),
            _asset(
                24,
                "Investor Pack + Data Room",
                "Everything investors need for due diligence.",
                "Compiled all eval reports",
                "Finalized unit economics model",
                "Security pack up to date",
                "All data terms documented",
                "LOIs collected and organized",
                "Moat ledger complete with evidence",
                "Data room set up and organized",
            ),
            _asset(
                25,
                "Capital Plan + Runway",
                "Detailed financial plan tied to milestones.",
                "Projected compute costs for 18 months",
                "Budgeted labeling and ops costs",
                "Security and compliance budget allocated",
                "Integration cost estimates completed",
                "Hiring plan tied to milestone gates",
                "Total runway calculated and validated",
            ),
            _asset(
                26,
                "Spinout Legal Pack",
                "Legal foundation for the standalone entity.",
                "Drafted DPAs (Data Processing Agreements)",
                "Defined AI usage terms",
                "Secured training rights documentation",
                "IP assignment and ownership documented",
                "Security policies formalized",
                "Legal counsel review completed",
            ),
            _asset(
                27,
                "Exit Map",
                "Acquirer logic + proof of defensibility.",
                "Identified top 5 potential acquirers",
                "Documented acquirer logic for each",
                "Proved data rights defensibility",
                "Demonstrated eval superiority vs alternatives",
                "Mapped workflow control and switching costs",
                "Exit map reviewed by board/advisors",
            ),
        ),
    ),
)
