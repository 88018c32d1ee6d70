from django.urls import path

from .views.annulus import AnnulusEvaluateView, AnnulusModifyView
from .views.barriers import BarrierDiagramsView, BarriersEvaluateView, BarriersListView, BarriersModifyView

urlpatterns = [
    path('barriers/', BarriersListView.as_view(), name='barriers_list'),
    path('barriers/diagrams/', BarrierDiagramsView.as_view(), name='barrier_diagrams'),
    path('barriers/modify/', BarriersModifyView.as_view(), name='barriers_modify'),
    path('barriers/evaluate/', BarriersEvaluateView.as_view(), name='barriers_evaluate'),
    path('annulus/modify/', AnnulusModifyView.as_view(), name='annulus_modify'),
    path('annulus/evaluate/', AnnulusEvaluateView.as_view(), name='annulus_evaluate'),
]
