from django.urls import path

from . import views

app_name = 'payouts'

urlpatterns = [
    path('payout-fees/', views.payout_fees, name='payout_fees'),
    path('payout-fees/preview/', views.payout_fee_preview, name='payout_fee_preview'),
    path('payout-fees/reconcile/', views.payout_fee_reconcile, name='payout_fee_reconcile'),
    path('payouts/', views.payouts, name='payouts'),
    path('payouts/<str:payout_id>/retry/', views.retry_payout, name='retry_payout'),
]
