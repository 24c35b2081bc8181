"""qareport default configuration file

Every configuration element ever used in the program must exist here.
These defaults may be overridden in the user's config file.

The variables guaranteed to be available are set in config.environ()
"""


# Directory in which to write generated reports
report_dir = 'reports'

# File names of the generated reports, within report_dir
html_report_name = 'client-report.html'
summary_report_name = 'executive-summary.md'
json_report_name = 'test-summary.json'

# Report metadata
project_name = 'Website Testing'
project_version = '1.0.0'
framework_name = 'Playwright + Cucumber'

# Title shown at the top of the HTML report
report_title = 'Website Testing Report'

# Map of tag to test category. The first tag of a test found here determines its category.
category_tags = {
    '@functional': 'Functional',
    '@ui-ux': 'UI/UX',
    '@responsive': 'Responsive',
    '@performance': 'Performance',
    '@accessibility': 'Accessibility',
    '@cross-browser': 'Cross-Browser',
    '@mobile': 'Mobile',
    '@desktop': 'Desktop',
    '@tablet': 'Tablet',
}

# Category of a test having none of the tags in category_tags
default_category = 'General'

# Explicit priority tags, checked in order of decreasing priority
priority_tags = [
    ('@critical', 'HIGH'),
    ('@high', 'HIGH'),
    ('@medium', 'MEDIUM'),
    ('@low', 'LOW'),
]

# Priority implied by the test type when no explicit priority tag is given
priority_type_tags = {
    '@functional': 'HIGH',
    '@performance': 'HIGH',
    '@ui-ux': 'MEDIUM',
    '@responsive': 'MEDIUM',
    '@accessibility': 'MEDIUM',
}

# Priority of a test with no explicit or implied priority
default_priority = 'MEDIUM'

# Description given to tests in each category
category_descriptions = {
    'Functional': 'Verifies core website functionality and user workflows',
    'UI/UX': 'Tests user interface design and user experience elements',
    'Responsive': 'Ensures website works correctly across different screen sizes',
    'Performance': 'Validates website loading speed and performance metrics',
    'Accessibility': 'Checks website accessibility compliance and usability',
    'Cross-Browser': 'Tests website compatibility across different browsers',
    'Mobile': 'Validates mobile-specific functionality and responsive design',
    'Desktop': 'Tests desktop-specific features and layout',
    'Tablet': 'Ensures proper functionality on tablet devices',
}

# Description of a test in a category not found in category_descriptions
default_description = 'General website testing'

# Minimum success rate (percent) for each overall assessment, from best to worst.
# A success rate below the last one is rated POOR.
assessment_thresholds = [
    (95, 'EXCELLENT'),
    (85, 'GOOD'),
    (70, 'FAIR'),
]

# Success rate (percent) below which failures must be addressed before production
production_success_rate = 95

# Total run time in milliseconds above which slow tests should be optimized
slow_suite_ms = 5 * 60 * 1000  # 5 minutes

# Results file parsing functions by format name. When the format is not given, they are tried
# in this order until one accepts the file.
result_parsers = {
    'cucumber': 'qareport.parser.cucumberparse.parse_data',
    'results': 'qareport.parser.resultsparse.parse_data',
}
