"""
AI Readiness Assessment Questions

Questionnaire organized by readiness domain:
1. Data Infrastructure
2. Talent & Capability
3. Ethics & Governance
4. Technical Infrastructure
5. Business Strategy
6. Data Quality
7. Security & Compliance

Three collections make up the catalog:
- Base questions asked of every organization (subject to allow-lists)
- Industry-specific follow-ups, keyed by industry
- Maturity escalations, asked once a gating question reached a given answer

Each question has:
- ID and domain assignment
- Question text and help text
- Answer options on a 1-4 scale (or the 1/4 pair for follow-ups), each with
  recommendations and an estimated cost range
- A weight table: base weight plus industry and company size multipliers
"""

from typing import Any, Dict, List, Optional

from .models import Domain, Industry, Question

# Domain definitions
DOMAINS = {
    "data_infrastructure": {
        "id": "data_infrastructure",
        "name": "Data Infrastructure",
        "description": "How is data stored, integrated and made available for AI workloads?",
        "icon": "bi-database",
        "color": "#0d6efd"
    },
    "talent_capability": {
        "id": "talent_capability",
        "name": "Talent & Capability",
        "description": "Does the organization have the skills and change capacity to adopt AI?",
        "icon": "bi-people",
        "color": "#20c997"
    },
    "ethics_governance": {
        "id": "ethics_governance",
        "name": "Ethics & Governance",
        "description": "Are there frameworks to oversee responsible use of AI?",
        "icon": "bi-shield-check",
        "color": "#6f42c1"
    },
    "technical_infrastructure": {
        "id": "technical_infrastructure",
        "name": "Technical Infrastructure",
        "description": "Is compute, tooling and deployment infrastructure ready for AI?",
        "icon": "bi-cpu",
        "color": "#fd7e14"
    },
    "business_strategy": {
        "id": "business_strategy",
        "name": "Business Strategy",
        "description": "How well is AI connected to business objectives and processes?",
        "icon": "bi-bullseye",
        "color": "#198754"
    },
    "data_quality": {
        "id": "data_quality",
        "name": "Data Quality",
        "description": "Is data accurate, complete and accessible enough to train and run models?",
        "icon": "bi-check2-circle",
        "color": "#0dcaf0"
    },
    "security_compliance": {
        "id": "security_compliance",
        "name": "Security & Compliance",
        "description": "Is data protected and are regulatory obligations met?",
        "icon": "bi-lock",
        "color": "#dc3545"
    }
}

# Shared weight multipliers
INDUSTRY_MULTIPLIERS = {
    "healthcare": 1.2,
    "finance": 1.2,
    "manufacturing": 1.1,
    "retail": 1.0,
    "technology": 1.3,
    "other": 1.0
}

COMPANY_SIZE_MULTIPLIERS = {
    "small": 0.9,
    "medium": 1.0,
    "large": 1.1,
    "enterprise": 1.2
}


def _weight(base_weight: float) -> Dict[str, Any]:
    return {
        "base_weight": base_weight,
        "industry": INDUSTRY_MULTIPLIERS,
        "company_size": COMPANY_SIZE_MULTIPLIERS
    }


def _cost(low: int, high: int) -> Dict[str, Any]:
    return {"min": low, "max": high, "currency": "USD"}


# Fallback recommendation when a domain collects none from its answers
DEFAULT_RECOMMENDATIONS = {
    Domain.DATA_INFRASTRUCTURE: "Consider implementing a centralized data storage solution",
    Domain.TALENT_CAPABILITY: "Invest in AI and data science training for your team",
    Domain.ETHICS_GOVERNANCE: "Develop AI ethics guidelines and governance frameworks",
    Domain.TECHNICAL_INFRASTRUCTURE: "Evaluate and upgrade computing resources for AI workloads",
    Domain.BUSINESS_STRATEGY: "Align AI initiatives with business objectives",
    Domain.DATA_QUALITY: "Implement data quality assessment and improvement processes",
    Domain.SECURITY_COMPLIANCE: "Review and enhance data security measures"
}

# Implementation roadmap, attached to every result
IMPLEMENTATION_MILESTONES = [
    {"month": 3, "description": "Initial Assessment and Planning", "domain": Domain.BUSINESS_STRATEGY},
    {"month": 6, "description": "Infrastructure Setup", "domain": Domain.TECHNICAL_INFRASTRUCTURE},
    {"month": 9, "description": "Data Integration", "domain": Domain.DATA_INFRASTRUCTURE},
    {"month": 12, "description": "Team Training", "domain": Domain.TALENT_CAPABILITY}
]

_BASE_QUESTION_DEFINITIONS: List[Dict[str, Any]] = [
    # =========================================================================
    # DATA INFRASTRUCTURE
    # =========================================================================
    {
        "id": "data-storage",
        "domain": "data_infrastructure",
        "text": "How do you currently store and manage your data?",
        "help_text": "Consider operational databases, warehouses, lakes and file shares.",
        "weight": _weight(1.5),
        "options": [
            {
                "value": 1,
                "label": "Basic",
                "description": "Data stored in basic files or simple databases",
                "recommendations": [
                    "Implement proper database system",
                    "Develop data management strategy",
                    "Create backup procedures"
                ],
                "estimated_cost": _cost(50000, 100000)
            },
            {
                "value": 2,
                "label": "Structured",
                "description": "Organized databases with basic management",
                "recommendations": [
                    "Implement data warehouse",
                    "Develop data governance",
                    "Create data catalog"
                ],
                "estimated_cost": _cost(100000, 200000)
            },
            {
                "value": 3,
                "label": "Advanced",
                "description": "Data warehouse with governance",
                "recommendations": [
                    "Implement data lake",
                    "Develop advanced analytics",
                    "Create data quality framework"
                ],
                "estimated_cost": _cost(200000, 400000)
            },
            {
                "value": 4,
                "label": "Optimized",
                "description": "Modern data lake with advanced management",
                "recommendations": [
                    "Implement AI-driven management",
                    "Develop real-time processing",
                    "Create automated governance"
                ],
                "estimated_cost": _cost(400000, 800000)
            }
        ]
    },

    # =========================================================================
    # DATA QUALITY
    # =========================================================================
    {
        "id": "data-quality",
        "domain": "data_quality",
        "text": "How would you rate the quality and accessibility of your data for AI applications?",
        "help_text": "Accuracy, completeness, consistency and how easily teams can reach the data.",
        "weight": _weight(1.7),
        "options": [
            {
                "value": 1,
                "label": "Basic",
                "description": "Unstructured data with quality issues and limited accessibility",
                "recommendations": [
                    "Implement data quality framework",
                    "Establish data cleaning procedures",
                    "Create data accessibility standards"
                ],
                "estimated_cost": _cost(40000, 90000)
            },
            {
                "value": 2,
                "label": "Intermediate",
                "description": "Partially structured data with some quality controls",
                "recommendations": [
                    "Enhance data validation processes",
                    "Implement automated data quality checks",
                    "Develop data governance policies"
                ],
                "estimated_cost": _cost(70000, 150000)
            },
            {
                "value": 3,
                "label": "Advanced",
                "description": "High-quality, well-structured data with robust accessibility",
                "recommendations": [
                    "Implement advanced data quality monitoring",
                    "Develop real-time data processing capabilities",
                    "Establish data quality metrics"
                ],
                "estimated_cost": _cost(120000, 300000)
            },
            {
                "value": 4,
                "label": "Optimized",
                "description": "Continuously monitored data with automated remediation",
                "recommendations": [
                    "Publish data quality SLAs to consuming teams"
                ],
                "estimated_cost": _cost(200000, 400000)
            }
        ]
    },

    # =========================================================================
    # TECHNICAL INFRASTRUCTURE
    # =========================================================================
    {
        "id": "technical-infrastructure",
        "domain": "technical_infrastructure",
        "text": "What is the state of your technical infrastructure for AI implementation?",
        "help_text": "Compute capacity, cloud services, environments for training and serving models.",
        "weight": _weight(1.6),
        "options": [
            {
                "value": 1,
                "label": "Basic",
                "description": "Limited computing resources and basic IT infrastructure",
                "recommendations": [
                    "Assess cloud computing needs",
                    "Upgrade hardware infrastructure",
                    "Implement scalable architecture"
                ],
                "estimated_cost": _cost(100000, 250000)
            },
            {
                "value": 2,
                "label": "Moderate",
                "description": "Some cloud resources and modern infrastructure components",
                "recommendations": [
                    "Optimize cloud resource utilization",
                    "Implement containerization",
                    "Enhance security measures"
                ],
                "estimated_cost": _cost(150000, 350000)
            },
            {
                "value": 3,
                "label": "Advanced",
                "description": "Robust cloud infrastructure with modern AI-ready components",
                "recommendations": [
                    "Implement advanced monitoring",
                    "Optimize cost management",
                    "Enhance disaster recovery"
                ],
                "estimated_cost": _cost(200000, 500000)
            },
            {
                "value": 4,
                "label": "Optimized",
                "description": "Elastic, automated AI platform shared across teams",
                "recommendations": [
                    "Offer self-service model serving to product teams"
                ],
                "estimated_cost": _cost(300000, 700000)
            }
        ]
    },
    {
        "id": "compute-sourcing",
        "domain": "technical_infrastructure",
        "text": "How do you source compute capacity for AI experiments and workloads?",
        "help_text": "Managed cloud services, rented capacity or in-house hardware.",
        "weight": _weight(1.2),
        "company_sizes": ["small", "medium"],
        "options": [
            {
                "value": 1,
                "label": "None",
                "description": "No dedicated compute available for AI work",
                "recommendations": [
                    "Start with managed cloud AI services",
                    "Set a monthly budget for experimentation"
                ],
                "estimated_cost": _cost(10000, 30000)
            },
            {
                "value": 2,
                "label": "Ad-hoc",
                "description": "Individual accounts or spare machines used informally",
                "recommendations": [
                    "Consolidate cloud accounts under one organization",
                    "Track AI compute spend separately"
                ],
                "estimated_cost": _cost(20000, 50000)
            },
            {
                "value": 3,
                "label": "Managed",
                "description": "Shared cloud environment with cost controls",
                "recommendations": [
                    "Automate environment provisioning"
                ],
                "estimated_cost": _cost(30000, 80000)
            },
            {
                "value": 4,
                "label": "Optimized",
                "description": "Right-sized, automated capacity matched to workload",
                "recommendations": [],
                "estimated_cost": _cost(50000, 120000)
            }
        ]
    },

    # =========================================================================
    # TALENT & CAPABILITY
    # =========================================================================
    {
        "id": "talent-readiness",
        "domain": "talent_capability",
        "text": "How would you assess your organization's AI talent and skills readiness?",
        "help_text": "Data scientists, ML engineers, and AI literacy among business staff.",
        "weight": _weight(1.7),
        "options": [
            {
                "value": 1,
                "label": "Limited",
                "description": "Few or no staff with AI/ML expertise",
                "recommendations": [
                    "Develop AI training program",
                    "Create hiring strategy for AI talent",
                    "Establish partnerships with AI experts"
                ],
                "estimated_cost": _cost(80000, 200000)
            },
            {
                "value": 2,
                "label": "Developing",
                "description": "Some AI expertise but gaps in key areas",
                "recommendations": [
                    "Expand internal AI training",
                    "Develop AI career paths",
                    "Create knowledge sharing programs"
                ],
                "estimated_cost": _cost(150000, 300000)
            },
            {
                "value": 3,
                "label": "Strong",
                "description": "Robust AI expertise across relevant areas",
                "recommendations": [
                    "Implement advanced AI training",
                    "Develop AI innovation programs",
                    "Create AI centers of excellence"
                ],
                "estimated_cost": _cost(200000, 450000)
            },
            {
                "value": 4,
                "label": "Leading",
                "description": "Deep AI expertise that attracts and develops talent",
                "recommendations": [
                    "Sponsor external AI research collaborations"
                ],
                "estimated_cost": _cost(300000, 600000)
            }
        ]
    },
    {
        "id": "change-management",
        "domain": "talent_capability",
        "text": "How effective is your organization's change management for AI adoption?",
        "help_text": "Communication, training and support when new tools change how people work.",
        "weight": _weight(1.5),
        "options": [
            {
                "value": 1,
                "label": "Basic",
                "description": "Limited change management capabilities",
                "recommendations": [
                    "Develop change management strategy",
                    "Create communication plan",
                    "Implement training programs"
                ],
                "estimated_cost": _cost(40000, 100000)
            },
            {
                "value": 2,
                "label": "Structured",
                "description": "Formal change management processes in place",
                "recommendations": [
                    "Enhance stakeholder engagement",
                    "Develop metrics for success",
                    "Create feedback mechanisms"
                ],
                "estimated_cost": _cost(70000, 150000)
            },
            {
                "value": 3,
                "label": "Advanced",
                "description": "Comprehensive change management framework",
                "recommendations": [
                    "Optimize change processes",
                    "Implement advanced analytics",
                    "Develop leadership programs"
                ],
                "estimated_cost": _cost(100000, 200000)
            },
            {
                "value": 4,
                "label": "Embedded",
                "description": "Change readiness is part of the culture",
                "recommendations": [],
                "estimated_cost": _cost(120000, 250000)
            }
        ]
    },
    {
        "id": "ai-center-of-excellence",
        "domain": "talent_capability",
        "text": "Does your organization operate an AI center of excellence?",
        "help_text": "A central team that sets standards, shares reusable assets and supports business units.",
        "weight": _weight(1.3),
        "company_sizes": ["large", "enterprise"],
        "options": [
            {
                "value": 1,
                "label": "None",
                "description": "AI work happens in isolated teams",
                "recommendations": [
                    "Charter a cross-functional AI working group",
                    "Inventory current AI initiatives"
                ],
                "estimated_cost": _cost(150000, 300000)
            },
            {
                "value": 2,
                "label": "Informal",
                "description": "A community of practice without dedicated staff",
                "recommendations": [
                    "Fund a dedicated center of excellence team",
                    "Define shared AI standards"
                ],
                "estimated_cost": _cost(250000, 500000)
            },
            {
                "value": 3,
                "label": "Established",
                "description": "Dedicated team supporting several business units",
                "recommendations": [
                    "Build a reusable model and component library"
                ],
                "estimated_cost": _cost(400000, 800000)
            },
            {
                "value": 4,
                "label": "Federated",
                "description": "Central standards with embedded AI teams in every unit",
                "recommendations": [],
                "estimated_cost": _cost(600000, 1200000)
            }
        ]
    },

    # =========================================================================
    # ETHICS & GOVERNANCE
    # =========================================================================
    {
        "id": "ethics-governance",
        "domain": "ethics_governance",
        "text": "How well established are your AI ethics and governance frameworks?",
        "help_text": "Policies, review boards and accountability for AI decisions.",
        "weight": _weight(1.6),
        "options": [
            {
                "value": 1,
                "label": "Initial",
                "description": "No formal AI ethics or governance framework",
                "recommendations": [
                    "Develop AI ethics guidelines",
                    "Create governance structure",
                    "Implement oversight mechanisms"
                ],
                "estimated_cost": _cost(50000, 120000)
            },
            {
                "value": 2,
                "label": "Developing",
                "description": "Basic ethics guidelines and governance structure",
                "recommendations": [
                    "Enhance ethics framework",
                    "Implement monitoring tools",
                    "Develop stakeholder engagement"
                ],
                "estimated_cost": _cost(80000, 180000)
            },
            {
                "value": 3,
                "label": "Mature",
                "description": "Comprehensive ethics and governance framework",
                "recommendations": [
                    "Optimize governance processes",
                    "Implement advanced monitoring",
                    "Develop industry leadership"
                ],
                "estimated_cost": _cost(150000, 300000)
            },
            {
                "value": 4,
                "label": "Leading",
                "description": "Governance is audited externally and continuously improved",
                "recommendations": [
                    "Publish an annual responsible AI report"
                ],
                "estimated_cost": _cost(200000, 400000)
            }
        ]
    },

    # =========================================================================
    # BUSINESS STRATEGY
    # =========================================================================
    {
        "id": "business-strategy",
        "domain": "business_strategy",
        "text": "How well is AI adoption aligned with your organizational strategy?",
        "help_text": "Whether AI initiatives are tied to measurable business objectives.",
        "weight": _weight(1.8),
        "options": [
            {
                "value": 1,
                "label": "No Alignment",
                "description": "No clear connection between AI initiatives and business strategy",
                "recommendations": [
                    "Develop AI strategy roadmap",
                    "Identify key business objectives for AI implementation",
                    "Create AI governance framework"
                ],
                "estimated_cost": _cost(30000, 80000)
            },
            {
                "value": 2,
                "label": "Partial Alignment",
                "description": "Some AI initiatives aligned with business goals but lacking comprehensive strategy",
                "recommendations": [
                    "Strengthen alignment between AI and business objectives",
                    "Develop KPIs for AI initiatives",
                    "Create change management plan"
                ],
                "estimated_cost": _cost(50000, 120000)
            },
            {
                "value": 3,
                "label": "Strong Alignment",
                "description": "Clear alignment between AI strategy and organizational objectives",
                "recommendations": [
                    "Optimize AI governance",
                    "Scale successful AI initiatives",
                    "Develop AI innovation pipeline"
                ],
                "estimated_cost": _cost(100000, 250000)
            },
            {
                "value": 4,
                "label": "AI-Driven",
                "description": "AI shapes strategy and new business models",
                "recommendations": [
                    "Explore AI-enabled products and revenue streams"
                ],
                "estimated_cost": _cost(150000, 350000)
            }
        ]
    },
    {
        "id": "process-maturity",
        "domain": "business_strategy",
        "text": "How mature are your organizational processes for AI implementation?",
        "help_text": "Intake, prioritization, delivery and value tracking for AI projects.",
        "weight": _weight(1.5),
        "options": [
            {
                "value": 1,
                "label": "Ad-hoc",
                "description": "No standardized processes for AI implementation",
                "recommendations": [
                    "Develop AI implementation framework",
                    "Create process documentation",
                    "Establish quality controls"
                ],
                "estimated_cost": _cost(40000, 100000)
            },
            {
                "value": 2,
                "label": "Defined",
                "description": "Basic processes defined but not fully implemented",
                "recommendations": [
                    "Optimize existing processes",
                    "Implement monitoring systems",
                    "Develop feedback mechanisms"
                ],
                "estimated_cost": _cost(70000, 150000)
            },
            {
                "value": 3,
                "label": "Managed",
                "description": "Processes followed consistently and measured",
                "recommendations": [
                    "Implement advanced process automation",
                    "Develop predictive analytics"
                ],
                "estimated_cost": _cost(100000, 200000)
            },
            {
                "value": 4,
                "label": "Optimized",
                "description": "Well-defined and continuously improved processes",
                "recommendations": [
                    "Create innovation frameworks"
                ],
                "estimated_cost": _cost(120000, 250000)
            }
        ]
    },

    # =========================================================================
    # SECURITY & COMPLIANCE
    # =========================================================================
    {
        "id": "data-security",
        "domain": "security_compliance",
        "text": "How well protected is the data used by your AI systems?",
        "help_text": "Access control, encryption and monitoring around training and inference data.",
        "weight": _weight(1.6),
        "options": [
            {
                "value": 1,
                "label": "Minimal",
                "description": "Few controls beyond default system settings",
                "recommendations": [
                    "Classify sensitive data used for AI",
                    "Enforce role-based access control",
                    "Encrypt data at rest and in transit"
                ],
                "estimated_cost": _cost(60000, 150000)
            },
            {
                "value": 2,
                "label": "Basic",
                "description": "Access controls and encryption on core systems",
                "recommendations": [
                    "Extend controls to analytics and ML environments",
                    "Introduce access reviews"
                ],
                "estimated_cost": _cost(90000, 200000)
            },
            {
                "value": 3,
                "label": "Managed",
                "description": "Consistent controls with regular audits",
                "recommendations": [
                    "Add automated anomaly detection on data access"
                ],
                "estimated_cost": _cost(150000, 300000)
            },
            {
                "value": 4,
                "label": "Optimized",
                "description": "Continuous monitoring with automated response",
                "recommendations": [],
                "estimated_cost": _cost(200000, 450000)
            }
        ]
    },
    {
        "id": "regulatory-reporting",
        "domain": "security_compliance",
        "text": "How do you document AI-assisted decisions for regulators and auditors?",
        "help_text": "Model documentation, decision logs and explainability evidence.",
        "weight": _weight(1.4),
        "industries": ["healthcare", "finance"],
        "options": [
            {
                "value": 1,
                "label": "Not documented",
                "description": "No record of how AI influences decisions",
                "recommendations": [
                    "Define documentation requirements for AI-assisted decisions",
                    "Appoint an owner for regulatory AI reporting"
                ],
                "estimated_cost": _cost(80000, 160000)
            },
            {
                "value": 2,
                "label": "Manual",
                "description": "Documentation assembled by hand on request",
                "recommendations": [
                    "Standardize model documentation templates"
                ],
                "estimated_cost": _cost(100000, 200000)
            },
            {
                "value": 3,
                "label": "Systematic",
                "description": "Documentation maintained for every production model",
                "recommendations": [
                    "Automate decision logging"
                ],
                "estimated_cost": _cost(150000, 300000)
            },
            {
                "value": 4,
                "label": "Automated",
                "description": "Audit-ready evidence generated automatically",
                "recommendations": [],
                "estimated_cost": _cost(250000, 500000)
            }
        ]
    }
]

_INDUSTRY_QUESTION_DEFINITIONS: Dict[str, List[Dict[str, Any]]] = {
    "healthcare": [
        {
            "id": "healthcare-data-privacy",
            "domain": "security_compliance",
            "text": "How does your organization handle healthcare data privacy and HIPAA compliance?",
            "weight": _weight(2.0),
            "industries": ["healthcare"],
            "dependencies": [
                {"question_id": "data-storage", "required_answer": 3}
            ],
            "options": [
                {
                    "value": 1,
                    "label": "Basic",
                    "description": "Minimal HIPAA compliance measures",
                    "recommendations": [
                        "Implement comprehensive HIPAA compliance program",
                        "Develop healthcare-specific data security protocols",
                        "Create PHI access audit system"
                    ],
                    "estimated_cost": _cost(100000, 200000)
                },
                {
                    "value": 4,
                    "label": "Advanced",
                    "description": "Full HIPAA compliance with automated monitoring",
                    "recommendations": [
                        "Implement AI-driven privacy monitoring",
                        "Develop advanced encryption protocols",
                        "Create automated compliance reporting"
                    ],
                    "estimated_cost": _cost(400000, 800000)
                }
            ]
        }
    ],
    "finance": [
        {
            "id": "finance-risk-assessment",
            "domain": "ethics_governance",
            "text": "How does your organization handle AI risk assessment in financial operations?",
            "weight": _weight(2.0),
            "industries": ["finance"],
            "dependencies": [
                {"question_id": "ethics-governance", "required_answer": 3}
            ],
            "options": [
                {
                    "value": 1,
                    "label": "Basic",
                    "description": "Manual risk assessment procedures",
                    "recommendations": [
                        "Implement automated risk assessment",
                        "Develop financial AI governance",
                        "Create risk monitoring dashboard"
                    ],
                    "estimated_cost": _cost(200000, 400000)
                },
                {
                    "value": 4,
                    "label": "Advanced",
                    "description": "AI-driven risk assessment and monitoring",
                    "recommendations": [
                        "Implement predictive risk modeling",
                        "Develop real-time monitoring",
                        "Create advanced reporting system"
                    ],
                    "estimated_cost": _cost(800000, 1600000)
                }
            ]
        }
    ],
    "manufacturing": [
        {
            "id": "manufacturing-quality",
            "domain": "data_quality",
            "text": "How do you handle quality control data in your manufacturing processes?",
            "weight": _weight(1.8),
            "industries": ["manufacturing"],
            "dependencies": [
                {"question_id": "data-quality", "required_answer": 2}
            ],
            "options": [
                {
                    "value": 1,
                    "label": "Basic",
                    "description": "Manual quality control data collection",
                    "recommendations": [
                        "Implement IoT sensors",
                        "Develop automated quality monitoring",
                        "Create predictive maintenance system"
                    ],
                    "estimated_cost": _cost(150000, 300000)
                },
                {
                    "value": 4,
                    "label": "Advanced",
                    "description": "AI-driven quality control system",
                    "recommendations": [
                        "Implement advanced analytics",
                        "Develop real-time optimization",
                        "Create digital twin system"
                    ],
                    "estimated_cost": _cost(600000, 1200000)
                }
            ]
        }
    ],
    "retail": [
        {
            "id": "retail-customer-data",
            "domain": "data_infrastructure",
            "text": "How do you manage and utilize customer data for personalization?",
            "weight": _weight(1.7),
            "industries": ["retail"],
            "dependencies": [
                {"question_id": "data-storage", "required_answer": 2}
            ],
            "options": [
                {
                    "value": 1,
                    "label": "Basic",
                    "description": "Basic customer data collection",
                    "recommendations": [
                        "Implement customer data platform",
                        "Develop personalization engine",
                        "Create customer segmentation"
                    ],
                    "estimated_cost": _cost(100000, 200000)
                },
                {
                    "value": 4,
                    "label": "Advanced",
                    "description": "AI-driven personalization system",
                    "recommendations": [
                        "Implement real-time personalization",
                        "Develop predictive analytics",
                        "Create omnichannel experience"
                    ],
                    "estimated_cost": _cost(400000, 800000)
                }
            ]
        }
    ],
    "technology": [
        {
            "id": "tech-innovation",
            "domain": "business_strategy",
            "text": "How do you incorporate AI innovation in your product development?",
            "weight": _weight(2.0),
            "industries": ["technology"],
            "dependencies": [
                {"question_id": "business-strategy", "required_answer": 3}
            ],
            "options": [
                {
                    "value": 1,
                    "label": "Basic",
                    "description": "Limited AI integration in products",
                    "recommendations": [
                        "Implement AI feature roadmap",
                        "Develop innovation lab",
                        "Create AI product strategy"
                    ],
                    "estimated_cost": _cost(200000, 400000)
                },
                {
                    "value": 4,
                    "label": "Advanced",
                    "description": "AI-first product development",
                    "recommendations": [
                        "Implement advanced AI research",
                        "Develop product innovation",
                        "Create AI ecosystem"
                    ],
                    "estimated_cost": _cost(800000, 1600000)
                }
            ]
        }
    ],
    "other": [
        {
            "id": "general-ai-adoption",
            "domain": "business_strategy",
            "text": "How do you approach AI adoption in your industry?",
            "weight": _weight(1.5),
            "industries": ["other"],
            "dependencies": [
                {"question_id": "business-strategy", "required_answer": 2}
            ],
            "options": [
                {
                    "value": 1,
                    "label": "Basic",
                    "description": "Exploratory AI adoption",
                    "recommendations": [
                        "Implement use case analysis",
                        "Develop adoption roadmap",
                        "Create pilot program"
                    ],
                    "estimated_cost": _cost(100000, 200000)
                },
                {
                    "value": 4,
                    "label": "Advanced",
                    "description": "Strategic AI transformation",
                    "recommendations": [
                        "Implement transformation program",
                        "Develop industry solutions",
                        "Create competitive advantage"
                    ],
                    "estimated_cost": _cost(400000, 800000)
                }
            ]
        }
    ]
}

_MATURITY_QUESTION_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "id": "advanced-data-integration",
        "domain": "data_infrastructure",
        "text": "How advanced is your data integration and processing pipeline?",
        "weight": _weight(1.8),
        "dependencies": [
            {"question_id": "data-storage", "required_answer": 3}
        ],
        "options": [
            {
                "value": 1,
                "label": "Basic Pipeline",
                "description": "Basic ETL processes with limited automation",
                "recommendations": [
                    "Implement automated pipelines",
                    "Develop data validation",
                    "Create monitoring system"
                ],
                "estimated_cost": _cost(150000, 300000)
            },
            {
                "value": 4,
                "label": "Advanced Pipeline",
                "description": "Fully automated data pipeline with real-time processing",
                "recommendations": [
                    "Implement streaming analytics",
                    "Develop advanced integration",
                    "Create self-healing pipelines"
                ],
                "estimated_cost": _cost(600000, 1200000)
            }
        ]
    },
    {
        "id": "mlops-practices",
        "domain": "technical_infrastructure",
        "text": "How mature are your MLOps practices and tools?",
        "weight": _weight(1.9),
        "dependencies": [
            {"question_id": "technical-infrastructure", "required_answer": 3}
        ],
        "options": [
            {
                "value": 1,
                "label": "Basic MLOps",
                "description": "Manual deployment and monitoring",
                "recommendations": [
                    "Implement CI/CD for ML",
                    "Develop model monitoring",
                    "Create automated testing"
                ],
                "estimated_cost": _cost(200000, 400000)
            },
            {
                "value": 4,
                "label": "Advanced MLOps",
                "description": "Fully automated ML lifecycle",
                "recommendations": [
                    "Implement advanced orchestration",
                    "Develop automated retraining",
                    "Create advanced monitoring"
                ],
                "estimated_cost": _cost(800000, 1600000)
            }
        ]
    }
]

# Materialized, immutable catalog
BASE_QUESTIONS: List[Question] = [Question.from_dict(q) for q in _BASE_QUESTION_DEFINITIONS]

INDUSTRY_QUESTIONS: Dict[Industry, List[Question]] = {
    Industry(industry): [Question.from_dict(q) for q in definitions]
    for industry, definitions in _INDUSTRY_QUESTION_DEFINITIONS.items()
}

MATURITY_QUESTIONS: List[Question] = [Question.from_dict(q) for q in _MATURITY_QUESTION_DEFINITIONS]


def all_catalog_questions() -> List[Question]:
    """Every question in the catalog: base, then industry follow-ups, then maturity escalations."""
    questions = list(BASE_QUESTIONS)
    for industry in Industry:
        questions.extend(INDUSTRY_QUESTIONS.get(industry, []))
    questions.extend(MATURITY_QUESTIONS)
    return questions


def get_questions_by_domain(domain: Domain) -> List[Question]:
    """Get all catalog questions for a specific domain."""
    return [q for q in all_catalog_questions() if q.domain == domain]


def get_domain_info(domain: Domain) -> Dict:
    """Get domain metadata."""
    return DOMAINS.get(domain.value, {})


def get_all_domains() -> List[Dict]:
    """Get all domain info in order."""
    return list(DOMAINS.values())


def get_question_count() -> int:
    """Get total number of catalog questions."""
    return len(all_catalog_questions())


def get_question_by_id(question_id: str) -> Optional[Question]:
    """Get a specific question by ID."""
    for q in all_catalog_questions():
        if q.id == question_id:
            return q
    return None
