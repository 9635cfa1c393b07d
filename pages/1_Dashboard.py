"""Dashboard page - Financial overview."""

import calendar
from datetime import datetime

import streamlit as st
import plotly.express as px
import plotly.graph_objects as go
from dateutil.relativedelta import relativedelta

from src.analytics.summary import category_spending, monthly_trends, summarize_transactions
from src.api.finance_client import ApiError
from src.utils.formatters import format_change, format_currency, format_month

st.title("\U0001F4CA Financial Dashboard")

# Get resources from session state
client = st.session_state.get('client')
config = st.session_state.get('config')

if not client or not config:
    st.warning("Application not properly initialized")
    st.stop()

symbol = config.currency_symbol

try:
    with st.spinner("Loading transactions..."):
        transactions = client.get_transactions()
        budgets = client.list_budgets()
except ApiError as e:
    st.error(f"Could not load data: {e}")
    st.stop()

today = datetime.now()
this_month = summarize_transactions(transactions, today.year, today.month)
last = today - relativedelta(months=1)
last_month = summarize_transactions(transactions, last.year, last.month)

# Key metrics
st.subheader("This Month at a Glance")

days_in_month = calendar.monthrange(today.year, today.month)[1]
days_remaining = days_in_month - today.day
over_budget_count = sum(1 for b in budgets if b.amount > 0 and b.spent_amount >= b.amount)

col1, col2, col3, col4 = st.columns(4)

with col1:
    st.metric("Income", format_currency(this_month.total_income, symbol))

with col2:
    st.metric(
        "Expenses",
        format_currency(this_month.total_expenses, symbol),
        delta=format_change(this_month.total_expenses, last_month.total_expenses),
        delta_color="inverse"
    )

with col3:
    st.metric(
        "Balance",
        format_currency(this_month.balance, symbol, show_sign=True),
        delta=f"{days_remaining} days left",
        delta_color="off"
    )

with col4:
    st.metric(
        "Over Budget",
        over_budget_count,
        delta=f"{over_budget_count} categories" if over_budget_count > 0 else "All good!",
        delta_color="inverse" if over_budget_count > 0 else "normal"
    )

st.divider()

# Charts row
chart_col1, chart_col2 = st.columns(2)

with chart_col1:
    st.subheader("Spending by Category")

    df = category_spending(transactions)
    if not df.empty:
        fig = px.pie(
            df.head(10),
            values='amount',
            names='category',
            hole=0.4,
            color_discrete_sequence=px.colors.qualitative.Set3
        )
        fig.update_traces(textposition='inside', textinfo='percent+label')
        fig.update_layout(
            showlegend=False,
            margin=dict(t=20, b=20, l=20, r=20)
        )
        st.plotly_chart(fig, use_container_width=True)
    else:
        st.info("No spending data available.")

with chart_col2:
    st.subheader("Monthly Trend")

    trend = monthly_trends(transactions, months=6)
    if not trend.empty:
        labels = [format_month(m) for m in trend['month']]
        fig = go.Figure()
        fig.add_trace(go.Bar(x=labels, y=trend['income'], name='Income', marker_color='#2ecc71'))
        fig.add_trace(go.Bar(x=labels, y=trend['expenses'], name='Expenses', marker_color='#e74c3c'))
        fig.update_layout(
            barmode='group',
            margin=dict(t=20, b=20, l=20, r=20),
            legend=dict(orientation='h', y=-0.2)
        )
        st.plotly_chart(fig, use_container_width=True)
    else:
        st.info("No transaction history yet.")

st.divider()

# Budget progress
st.subheader("Budgets This Month")

if not budgets:
    st.info("No budgets set for this month.")
else:
    for budget in budgets:
        ratio = float(budget.spent_amount / budget.amount) if budget.amount > 0 else 0.0
        remaining = budget.remaining_amount
        if remaining >= 0:
            left = f"{format_currency(remaining, symbol)} left"
        else:
            left = f"{format_currency(-remaining, symbol)} over"
        st.progress(
            min(ratio, 1.0),
            text=(
                f"{budget.category}: {format_currency(budget.spent_amount, symbol)} of "
                f"{format_currency(budget.amount, symbol)} ({ratio:.0%}), {left}"
            )
        )
