from django import forms

from .models import MaintenanceSettings, PageStatus
from .services import DURATION_CHOICES, DURATION_NONE


class MaintenanceMessageForm(forms.ModelForm):
    class Meta:
        model = MaintenanceSettings
        fields = ['message']
        widgets = {
            'message': forms.Textarea(attrs={
                'rows': 4,
                'placeholder': "e.g., We'll be back online shortly. Thanks for your patience.",
            }),
        }


class MaintenanceToggleForm(forms.Form):
    ACTION_ACTIVATE = 'activate'
    ACTION_DEACTIVATE = 'deactivate'

    action = forms.ChoiceField(choices=[
        (ACTION_ACTIVATE, 'Activate maintenance mode'),
        (ACTION_DEACTIVATE, 'Go live'),
    ])
    duration = forms.ChoiceField(
        choices=DURATION_CHOICES,
        initial=DURATION_NONE,
        required=False,
        widget=forms.RadioSelect,
    )

    def clean_duration(self):
        return self.cleaned_data.get('duration') or DURATION_NONE


class PageStatusForm(forms.Form):
    path = forms.CharField(max_length=255, widget=forms.HiddenInput)
    status = forms.ChoiceField(choices=PageStatus.STATUS_CHOICES)

    def clean_path(self):
        path = (self.cleaned_data.get('path') or '').strip()
        if not path.startswith('/'):
            raise forms.ValidationError("Page path must start with '/'.")
        return path
