from django.urls import path

from .views.schematic import WellSchematicView

urlpatterns = [
    path('well-schematic/', WellSchematicView.as_view(), name='well_schematic'),
]
