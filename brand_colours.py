MAIN_RED = '#C01823'

IIC_BLACK = '#24272A'
GREY = '#54575A'
LIGHT_GREY = '#97989A'
PLOT_BACKGROUND = '#FFFFFF'
PAGE_BACKGROUND = '#F1F1F1'

# Tableau 10, assigned to regions in dataset order
REGION_PALETTE = [
    '#4E79A7', '#F28E2C', '#E15759', '#76B7B2', '#59A14F',
    '#EDC949', '#AF7AA1', '#FF9DA7', '#9C755F', '#BAB0AB'
]
