# Default curriculum for new loan officers; tasks are seeded per user at onboarding.
# Days without an objective fall back to DEFAULT_OBJECTIVE / DEFAULT_EXTRA_TIME_ACTIVITY.

DEFAULT_OBJECTIVE = "Day {day} objectives for {theme}"
DEFAULT_EXTRA_TIME_ACTIVITY = "Additional research and networking"

FOUNDATION_ROADMAP = {
    "id": "foundations-newlo-60min",
    "name": "Foundations - New LO (60-90 min/day)",
    "focus": "foundations",
    "experience_level": "new",
    "time_commitment": "60-90",
    "description": "Extended baseline for brand-new LOs with little/no setup. 13 weeks, 5 days/week, 3 tasks/day.",
    "weeks": [
        {
            "week": 1,
            "theme": "Foundation Setup",
            "days": [
                {
                    "day": 1,
                    "objective": "Get your core business tools in place.",
                    "extra_time_activity": "Update your LinkedIn headline and about section.",
                    "tasks": [
                        {
                            "title": "Complete CRM setup",
                            "description": "Set up your customer relationship management system",
                            "category": "organization",
                            "estimated_minutes": 60
                        },
                        {
                            "title": "Create professional email signature",
                            "description": "Design an email signature with your contact info, license number, and NMLS ID",
                            "category": "branding",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Set up business cards",
                            "description": "Order professional business cards or update your existing design",
                            "category": "branding",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Update LinkedIn profile",
                            "description": "Optimize your LinkedIn profile with mortgage industry keywords and experience",
                            "category": "branding",
                            "estimated_minutes": 45
                        }
                    ]
                },
                {
                    "day": 2,
                    "objective": "Start building your local referral network.",
                    "extra_time_activity": "Introduce yourself in one of the groups you joined.",
                    "tasks": [
                        {
                            "title": "Send 5 realtor introduction emails",
                            "description": "Use the realtor intro template to connect with new real estate agents in your area",
                            "category": "networking",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Join 3 local Facebook groups",
                            "description": "Find and join local real estate investor, homebuyer, and professional networking groups",
                            "category": "networking",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Research top 20 realtors in your area",
                            "description": "Create a list of high-producing realtors with their contact information and recent sales data",
                            "category": "research",
                            "estimated_minutes": 45
                        },
                        {
                            "title": "Schedule 2 coffee meetings",
                            "description": "Reach out to industry contacts to schedule informal coffee meetings this week",
                            "category": "networking",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 3,
                    "objective": "Understand your market and reconnect with past clients.",
                    "extra_time_activity": "Note three questions borrowers asked you this year.",
                    "tasks": [
                        {
                            "title": "Analyze local market trends",
                            "description": "Research recent home sales, price trends, and inventory levels in your target area",
                            "category": "research",
                            "estimated_minutes": 60
                        },
                        {
                            "title": "Create rate comparison sheet",
                            "description": "Compare your rates with 3 competitors and identify your competitive advantages",
                            "category": "organization",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Call 10 past clients",
                            "description": "Reconnect with previous clients to ask for referrals and reviews",
                            "category": "networking",
                            "estimated_minutes": 45
                        }
                    ]
                },
                {
                    "day": 4,
                    "objective": "Make it easy for prospects to book time with you.",
                    "extra_time_activity": "Ask a colleague to review your bio.",
                    "tasks": [
                        {
                            "title": "Set up calendaring links",
                            "description": "Create a booking link with buffers and confirmation emails.",
                            "category": "organization",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Organize compliance docs",
                            "description": "Collect license, NMLS, and standard disclosures in one folder.",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Draft bio",
                            "description": "Write a 3-sentence bio for email/social/website.",
                            "category": "branding",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 5,
                    "objective": "Prepare reusable outreach for next week.",
                    "extra_time_activity": "Review the week and list anything left unfinished.",
                    "tasks": [
                        {
                            "title": "Set up email templates",
                            "description": "Create canned responses for intro, follow-up, and doc requests.",
                            "category": "organization",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Set up calendaring links",
                            "description": "Create a booking link with buffers and confirmation emails.",
                            "category": "organization",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Organize compliance docs",
                            "description": "Collect license, NMLS, and standard disclosures in one folder.",
                            "category": "admin",
                            "estimated_minutes": 20
                        }
                    ]
                }
            ]
        },
        {
            "week": 2,
            "theme": "Networking Foundation",
            "days": [
                {
                    "day": 1,
                    "objective": "Know exactly who you will contact.",
                    "extra_time_activity": "Tag each contact by relationship strength.",
                    "tasks": [
                        {
                            "title": "Build top-50 contact list",
                            "description": "Combine phone, email, LinkedIn into one sheet.",
                            "category": "organization",
                            "estimated_minutes": 40
                        },
                        {
                            "title": "Identify 10 local pros",
                            "description": "Find CPAs/attorneys/contractors for future partnerships.",
                            "category": "research",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Draft intro DM",
                            "description": "Write a friendly intro for DMs (LinkedIn/FB).",
                            "category": "content",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 2,
                    "objective": "Open your first social conversations.",
                    "extra_time_activity": "Comment on three posts from local realtors.",
                    "tasks": [
                        {
                            "title": "Send 5 LinkedIn messages",
                            "description": "Outreach to 5 relevant contacts.",
                            "category": "networking",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Build top-50 contact list",
                            "description": "Combine phone, email, LinkedIn into one sheet.",
                            "category": "organization",
                            "estimated_minutes": 40
                        },
                        {
                            "title": "Identify 10 local pros",
                            "description": "Find CPAs/attorneys/contractors for future partnerships.",
                            "category": "research",
                            "estimated_minutes": 30
                        }
                    ]
                },
                {
                    "day": 3,
                    "objective": "Turn conversations into meetings.",
                    "extra_time_activity": "Prepare three questions for each meeting.",
                    "tasks": [
                        {
                            "title": "Draft intro DM",
                            "description": "Write a friendly intro for DMs (LinkedIn/FB).",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Send 5 LinkedIn messages",
                            "description": "Outreach to 5 relevant contacts.",
                            "category": "networking",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Build top-50 contact list",
                            "description": "Combine phone, email, LinkedIn into one sheet.",
                            "category": "organization",
                            "estimated_minutes": 40
                        }
                    ]
                },
                {
                    "day": 4,
                    "objective": "Share something useful with your network.",
                    "extra_time_activity": "Send your intro DM to two past clients.",
                    "tasks": [
                        {
                            "title": "Identify 10 local pros",
                            "description": "Find CPAs/attorneys/contractors for future partnerships.",
                            "category": "research",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Draft intro DM",
                            "description": "Write a friendly intro for DMs (LinkedIn/FB).",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Send 5 LinkedIn messages",
                            "description": "Outreach to 5 relevant contacts.",
                            "category": "networking",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 5,
                    "objective": "Close the week with a clean contact list.",
                    "extra_time_activity": "Block time on your calendar for next week's tasks.",
                    "tasks": [
                        {
                            "title": "Build top-50 contact list",
                            "description": "Combine phone, email, LinkedIn into one sheet.",
                            "category": "organization",
                            "estimated_minutes": 40
                        },
                        {
                            "title": "Identify 10 local pros",
                            "description": "Find CPAs/attorneys/contractors for future partnerships.",
                            "category": "research",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Draft intro DM",
                            "description": "Write a friendly intro for DMs (LinkedIn/FB).",
                            "category": "content",
                            "estimated_minutes": 15
                        }
                    ]
                }
            ]
        },
        {
            "week": 3,
            "theme": "Market Research & Positioning",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Neighborhood snapshot",
                            "description": "Pull data for 3 target neighborhoods.",
                            "category": "research",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "USP statement",
                            "description": "Write your unique sales proposition.",
                            "category": "strategy",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "FAQ one-pager",
                            "description": "Answer top 7 buyer/refi FAQs for your market.",
                            "category": "content",
                            "estimated_minutes": 25
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Competitor notes",
                            "description": "Document pros/cons of competitors' messaging.",
                            "category": "research",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Neighborhood snapshot",
                            "description": "Pull data for 3 target neighborhoods.",
                            "category": "research",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "USP statement",
                            "description": "Write your unique sales proposition.",
                            "category": "strategy",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "FAQ one-pager",
                            "description": "Answer top 7 buyer/refi FAQs for your market.",
                            "category": "content",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Competitor notes",
                            "description": "Document pros/cons of competitors' messaging.",
                            "category": "research",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Neighborhood snapshot",
                            "description": "Pull data for 3 target neighborhoods.",
                            "category": "research",
                            "estimated_minutes": 30
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "USP statement",
                            "description": "Write your unique sales proposition.",
                            "category": "strategy",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "FAQ one-pager",
                            "description": "Answer top 7 buyer/refi FAQs for your market.",
                            "category": "content",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Competitor notes",
                            "description": "Document pros/cons of competitors' messaging.",
                            "category": "research",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Neighborhood snapshot",
                            "description": "Pull data for 3 target neighborhoods.",
                            "category": "research",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "USP statement",
                            "description": "Write your unique sales proposition.",
                            "category": "strategy",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "FAQ one-pager",
                            "description": "Answer top 7 buyer/refi FAQs for your market.",
                            "category": "content",
                            "estimated_minutes": 25
                        }
                    ]
                }
            ]
        },
        {
            "week": 4,
            "theme": "Outreach Week 1 (Warm Network)",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Send 5 warm emails",
                            "description": "Use warm script to offer a free equity/mortgage check-up.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Post intro video",
                            "description": "30-sec intro on LinkedIn/FB/IG.",
                            "category": "content",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Follow-up 3",
                            "description": "Follow up with 3 responders from yesterday.",
                            "category": "followup",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Set 1 discovery call",
                            "description": "Book one 15-min needs call.",
                            "category": "pipeline",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Send 5 warm emails",
                            "description": "Use warm script to offer a free equity/mortgage check-up.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Post intro video",
                            "description": "30-sec intro on LinkedIn/FB/IG.",
                            "category": "content",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Follow-up 3",
                            "description": "Follow up with 3 responders from yesterday.",
                            "category": "followup",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Set 1 discovery call",
                            "description": "Book one 15-min needs call.",
                            "category": "pipeline",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Send 5 warm emails",
                            "description": "Use warm script to offer a free equity/mortgage check-up.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Post intro video",
                            "description": "30-sec intro on LinkedIn/FB/IG.",
                            "category": "content",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Follow-up 3",
                            "description": "Follow up with 3 responders from yesterday.",
                            "category": "followup",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Set 1 discovery call",
                            "description": "Book one 15-min needs call.",
                            "category": "pipeline",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Send 5 warm emails",
                            "description": "Use warm script to offer a free equity/mortgage check-up.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Post intro video",
                            "description": "30-sec intro on LinkedIn/FB/IG.",
                            "category": "content",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Follow-up 3",
                            "description": "Follow up with 3 responders from yesterday.",
                            "category": "followup",
                            "estimated_minutes": 15
                        }
                    ]
                }
            ]
        },
        {
            "week": 5,
            "theme": "Pre-Approval & Discovery",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Discovery checklist",
                            "description": "Finalize your discovery question list.",
                            "category": "education",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Doc checklist",
                            "description": "Finalize document list handout (borrower-friendly).",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Run 1 discovery call",
                            "description": "Practice or live call using your checklist.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Debrief improvements",
                            "description": "Note gaps; update checklist & scripts.",
                            "category": "practice",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Discovery checklist",
                            "description": "Finalize your discovery question list.",
                            "category": "education",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Doc checklist",
                            "description": "Finalize document list handout (borrower-friendly).",
                            "category": "admin",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Run 1 discovery call",
                            "description": "Practice or live call using your checklist.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Debrief improvements",
                            "description": "Note gaps; update checklist & scripts.",
                            "category": "practice",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Discovery checklist",
                            "description": "Finalize your discovery question list.",
                            "category": "education",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Doc checklist",
                            "description": "Finalize document list handout (borrower-friendly).",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Run 1 discovery call",
                            "description": "Practice or live call using your checklist.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Debrief improvements",
                            "description": "Note gaps; update checklist & scripts.",
                            "category": "practice",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Discovery checklist",
                            "description": "Finalize your discovery question list.",
                            "category": "education",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Doc checklist",
                            "description": "Finalize document list handout (borrower-friendly).",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Run 1 discovery call",
                            "description": "Practice or live call using your checklist.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        }
                    ]
                }
            ]
        },
        {
            "week": 6,
            "theme": "Outreach Week 2 (Expansion)",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Send 5 warm DMs",
                            "description": "Personalized DMs to remaining warm contacts.",
                            "category": "outreach",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Post value tip",
                            "description": "Share a quick HELOC/mortgage tip.",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Book 1 coffee",
                            "description": "Invite a contact to meet.",
                            "category": "networking",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Follow-up 3",
                            "description": "Ping 3 people who clicked/opened.",
                            "category": "followup",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Send 5 warm DMs",
                            "description": "Personalized DMs to remaining warm contacts.",
                            "category": "outreach",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Post value tip",
                            "description": "Share a quick HELOC/mortgage tip.",
                            "category": "content",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Book 1 coffee",
                            "description": "Invite a contact to meet.",
                            "category": "networking",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Follow-up 3",
                            "description": "Ping 3 people who clicked/opened.",
                            "category": "followup",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Send 5 warm DMs",
                            "description": "Personalized DMs to remaining warm contacts.",
                            "category": "outreach",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Post value tip",
                            "description": "Share a quick HELOC/mortgage tip.",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Book 1 coffee",
                            "description": "Invite a contact to meet.",
                            "category": "networking",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Follow-up 3",
                            "description": "Ping 3 people who clicked/opened.",
                            "category": "followup",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Send 5 warm DMs",
                            "description": "Personalized DMs to remaining warm contacts.",
                            "category": "outreach",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Post value tip",
                            "description": "Share a quick HELOC/mortgage tip.",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Book 1 coffee",
                            "description": "Invite a contact to meet.",
                            "category": "networking",
                            "estimated_minutes": 15
                        }
                    ]
                }
            ]
        },
        {
            "week": 7,
            "theme": "Realtor Partnerships",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Shortlist 10 realtors",
                            "description": "Identify agents aligned to your niche.",
                            "category": "research",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Draft realtor script",
                            "description": "Prepare partnership pitch.",
                            "category": "content",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "One-pager",
                            "description": "Create a quick realtor handout.",
                            "category": "content",
                            "estimated_minutes": 30
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Cold outreach (5)",
                            "description": "Send intro emails to 5 target realtors.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Shortlist 10 realtors",
                            "description": "Identify agents aligned to your niche.",
                            "category": "research",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Draft realtor script",
                            "description": "Prepare partnership pitch.",
                            "category": "content",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "One-pager",
                            "description": "Create a quick realtor handout.",
                            "category": "content",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Cold outreach (5)",
                            "description": "Send intro emails to 5 target realtors.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Shortlist 10 realtors",
                            "description": "Identify agents aligned to your niche.",
                            "category": "research",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Draft realtor script",
                            "description": "Prepare partnership pitch.",
                            "category": "content",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "One-pager",
                            "description": "Create a quick realtor handout.",
                            "category": "content",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Cold outreach (5)",
                            "description": "Send intro emails to 5 target realtors.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Shortlist 10 realtors",
                            "description": "Identify agents aligned to your niche.",
                            "category": "research",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Draft realtor script",
                            "description": "Prepare partnership pitch.",
                            "category": "content",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "One-pager",
                            "description": "Create a quick realtor handout.",
                            "category": "content",
                            "estimated_minutes": 30
                        }
                    ]
                }
            ]
        },
        {
            "week": 8,
            "theme": "Application Push",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Chase stale leads",
                            "description": "Nudge 5 lukewarm contacts.",
                            "category": "followup",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Conversion call",
                            "description": "Book/run one conversion-focused call.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Send app to 1 lead",
                            "description": "Get one prospect to submit an application.",
                            "category": "pipeline",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Circle back x3",
                            "description": "Touch 3 past prospects.",
                            "category": "followup",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Chase stale leads",
                            "description": "Nudge 5 lukewarm contacts.",
                            "category": "followup",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Conversion call",
                            "description": "Book/run one conversion-focused call.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Send app to 1 lead",
                            "description": "Get one prospect to submit an application.",
                            "category": "pipeline",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Circle back x3",
                            "description": "Touch 3 past prospects.",
                            "category": "followup",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Chase stale leads",
                            "description": "Nudge 5 lukewarm contacts.",
                            "category": "followup",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Conversion call",
                            "description": "Book/run one conversion-focused call.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Send app to 1 lead",
                            "description": "Get one prospect to submit an application.",
                            "category": "pipeline",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Circle back x3",
                            "description": "Touch 3 past prospects.",
                            "category": "followup",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Chase stale leads",
                            "description": "Nudge 5 lukewarm contacts.",
                            "category": "followup",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Conversion call",
                            "description": "Book/run one conversion-focused call.",
                            "category": "pipeline",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Send app to 1 lead",
                            "description": "Get one prospect to submit an application.",
                            "category": "pipeline",
                            "estimated_minutes": 20
                        }
                    ]
                }
            ]
        },
        {
            "week": 9,
            "theme": "Pipeline Expansion",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Test new channel",
                            "description": "Try TikTok, Instagram, or local event.",
                            "category": "marketing",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Reach cold list",
                            "description": "Hit 10 cold prospects.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Value post",
                            "description": "Publish one educational post.",
                            "category": "content",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Partner touch",
                            "description": "Reach out to 3 referral partners.",
                            "category": "networking",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Test new channel",
                            "description": "Try TikTok, Instagram, or local event.",
                            "category": "marketing",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Reach cold list",
                            "description": "Hit 10 cold prospects.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Value post",
                            "description": "Publish one educational post.",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Partner touch",
                            "description": "Reach out to 3 referral partners.",
                            "category": "networking",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Test new channel",
                            "description": "Try TikTok, Instagram, or local event.",
                            "category": "marketing",
                            "estimated_minutes": 30
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Reach cold list",
                            "description": "Hit 10 cold prospects.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Value post",
                            "description": "Publish one educational post.",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Partner touch",
                            "description": "Reach out to 3 referral partners.",
                            "category": "networking",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Test new channel",
                            "description": "Try TikTok, Instagram, or local event.",
                            "category": "marketing",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Reach cold list",
                            "description": "Hit 10 cold prospects.",
                            "category": "outreach",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Value post",
                            "description": "Publish one educational post.",
                            "category": "content",
                            "estimated_minutes": 15
                        }
                    ]
                }
            ]
        },
        {
            "week": 10,
            "theme": "Niche Angles (Pick One)",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Pick a niche",
                            "description": "Choose debt-consolidation, renovation, or investor.",
                            "category": "strategy",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Adapt scripts",
                            "description": "Tailor 2 scripts to the niche.",
                            "category": "content",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Niche post",
                            "description": "Publish one niche post.",
                            "category": "content",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Niche outreach",
                            "description": "DM/email 3 people who fit the niche.",
                            "category": "outreach",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Pick a niche",
                            "description": "Choose debt-consolidation, renovation, or investor.",
                            "category": "strategy",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Adapt scripts",
                            "description": "Tailor 2 scripts to the niche.",
                            "category": "content",
                            "estimated_minutes": 25
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Niche post",
                            "description": "Publish one niche post.",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Niche outreach",
                            "description": "DM/email 3 people who fit the niche.",
                            "category": "outreach",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Pick a niche",
                            "description": "Choose debt-consolidation, renovation, or investor.",
                            "category": "strategy",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Adapt scripts",
                            "description": "Tailor 2 scripts to the niche.",
                            "category": "content",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Niche post",
                            "description": "Publish one niche post.",
                            "category": "content",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Niche outreach",
                            "description": "DM/email 3 people who fit the niche.",
                            "category": "outreach",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Pick a niche",
                            "description": "Choose debt-consolidation, renovation, or investor.",
                            "category": "strategy",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Adapt scripts",
                            "description": "Tailor 2 scripts to the niche.",
                            "category": "content",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Niche post",
                            "description": "Publish one niche post.",
                            "category": "content",
                            "estimated_minutes": 15
                        }
                    ]
                }
            ]
        },
        {
            "week": 11,
            "theme": "Pipeline Push #2",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Call block",
                            "description": "10-minute call sprint to 3 hottest leads.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Underwrite-lite",
                            "description": "Rough LTV/DTI math for 2 prospects.",
                            "category": "education",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Pre-approval template",
                            "description": "Send pre-approval process template to 1 lead.",
                            "category": "pipeline",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Reshare best post",
                            "description": "Repost top performer.",
                            "category": "content",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Call block",
                            "description": "10-minute call sprint to 3 hottest leads.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Underwrite-lite",
                            "description": "Rough LTV/DTI math for 2 prospects.",
                            "category": "education",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Pre-approval template",
                            "description": "Send pre-approval process template to 1 lead.",
                            "category": "pipeline",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Reshare best post",
                            "description": "Repost top performer.",
                            "category": "content",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Call block",
                            "description": "10-minute call sprint to 3 hottest leads.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Underwrite-lite",
                            "description": "Rough LTV/DTI math for 2 prospects.",
                            "category": "education",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Pre-approval template",
                            "description": "Send pre-approval process template to 1 lead.",
                            "category": "pipeline",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Reshare best post",
                            "description": "Repost top performer.",
                            "category": "content",
                            "estimated_minutes": 10
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Call block",
                            "description": "10-minute call sprint to 3 hottest leads.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Underwrite-lite",
                            "description": "Rough LTV/DTI math for 2 prospects.",
                            "category": "education",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Pre-approval template",
                            "description": "Send pre-approval process template to 1 lead.",
                            "category": "pipeline",
                            "estimated_minutes": 15
                        }
                    ]
                }
            ]
        },
        {
            "week": 12,
            "theme": "Conversion Week",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Close plan",
                            "description": "Write step-by-step plan per active file.",
                            "category": "pipeline",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Calendar holds",
                            "description": "Block doc chase windows for the week.",
                            "category": "admin",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Escalate 1 blocker",
                            "description": "Ask manager/peer for help.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Daily updates",
                            "description": "Short updates to active leads.",
                            "category": "followup",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Close plan",
                            "description": "Write step-by-step plan per active file.",
                            "category": "pipeline",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Calendar holds",
                            "description": "Block doc chase windows for the week.",
                            "category": "admin",
                            "estimated_minutes": 15
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Escalate 1 blocker",
                            "description": "Ask manager/peer for help.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Daily updates",
                            "description": "Short updates to active leads.",
                            "category": "followup",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Close plan",
                            "description": "Write step-by-step plan per active file.",
                            "category": "pipeline",
                            "estimated_minutes": 25
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Calendar holds",
                            "description": "Block doc chase windows for the week.",
                            "category": "admin",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Escalate 1 blocker",
                            "description": "Ask manager/peer for help.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Daily updates",
                            "description": "Short updates to active leads.",
                            "category": "followup",
                            "estimated_minutes": 10
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Close plan",
                            "description": "Write step-by-step plan per active file.",
                            "category": "pipeline",
                            "estimated_minutes": 25
                        },
                        {
                            "title": "Calendar holds",
                            "description": "Block doc chase windows for the week.",
                            "category": "admin",
                            "estimated_minutes": 15
                        },
                        {
                            "title": "Escalate 1 blocker",
                            "description": "Ask manager/peer for help.",
                            "category": "pipeline",
                            "estimated_minutes": 10
                        }
                    ]
                }
            ]
        },
        {
            "week": 13,
            "theme": "Momentum & Scale",
            "days": [
                {
                    "day": 1,
                    "tasks": [
                        {
                            "title": "Template pack",
                            "description": "Turn best scripts into reusable templates.",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Schedule 2 weeks posts",
                            "description": "Use scheduler to plan posts.",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Partner day",
                            "description": "Book 2 partner coffees (realtor/contractor/CPA).",
                            "category": "networking",
                            "estimated_minutes": 30
                        }
                    ]
                },
                {
                    "day": 2,
                    "tasks": [
                        {
                            "title": "Thank-yous",
                            "description": "Send 3 thank-you notes.",
                            "category": "followup",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Template pack",
                            "description": "Turn best scripts into reusable templates.",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Schedule 2 weeks posts",
                            "description": "Use scheduler to plan posts.",
                            "category": "admin",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 3,
                    "tasks": [
                        {
                            "title": "Partner day",
                            "description": "Book 2 partner coffees (realtor/contractor/CPA).",
                            "category": "networking",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Thank-yous",
                            "description": "Send 3 thank-you notes.",
                            "category": "followup",
                            "estimated_minutes": 10
                        },
                        {
                            "title": "Template pack",
                            "description": "Turn best scripts into reusable templates.",
                            "category": "admin",
                            "estimated_minutes": 20
                        }
                    ]
                },
                {
                    "day": 4,
                    "tasks": [
                        {
                            "title": "Schedule 2 weeks posts",
                            "description": "Use scheduler to plan posts.",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Partner day",
                            "description": "Book 2 partner coffees (realtor/contractor/CPA).",
                            "category": "networking",
                            "estimated_minutes": 30
                        },
                        {
                            "title": "Thank-yous",
                            "description": "Send 3 thank-you notes.",
                            "category": "followup",
                            "estimated_minutes": 10
                        }
                    ]
                },
                {
                    "day": 5,
                    "tasks": [
                        {
                            "title": "Template pack",
                            "description": "Turn best scripts into reusable templates.",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Schedule 2 weeks posts",
                            "description": "Use scheduler to plan posts.",
                            "category": "admin",
                            "estimated_minutes": 20
                        },
                        {
                            "title": "Partner day",
                            "description": "Book 2 partner coffees (realtor/contractor/CPA).",
                            "category": "networking",
                            "estimated_minutes": 30
                        }
                    ]
                }
            ]
        }
    ]
}
